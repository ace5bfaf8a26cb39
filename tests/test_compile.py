def test_compile():
    # Every module must import with only the declared dependencies installed
    import polystructures
    import polystructures.vectors
    import polystructures.typing
    import polystructures.structures
    import polystructures.multistructures
    import polystructures.wkt
    import polystructures.calc
    import polystructures.parsers
    import polystructures.utils.observable

    assert polystructures.__version__.startswith('v')
