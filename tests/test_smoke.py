def test_import() -> None:
    import wgraph
    from wgraph import __version__
    assert isinstance(__version__, str)


def test_public_api() -> None:
    from wgraph import WeightedGraph, WeightedGraphInterface, NULL_EDGE, NOT_FOUND
    graph = WeightedGraph(2)
    assert isinstance(graph, WeightedGraphInterface)
    assert NULL_EDGE is None
    assert NOT_FOUND == -1


def test_module_docstrings() -> None:
    from wgraph.graph import errors, interface
    assert errors.__doc__ and "Exceptions" in errors.__doc__
    assert interface.__doc__ and "Contract" in interface.__doc__
