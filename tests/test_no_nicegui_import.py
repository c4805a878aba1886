import sys


def test_imports_without_nicegui():
    """Verify importing slopegraph does not import nicegui as a side-effect.

    nicegui is only needed by the demo app; the library must stay headless.
    """
    nicegui_modules = [k for k in list(sys.modules.keys()) if k.startswith("nicegui")]
    for mod in nicegui_modules:
        del sys.modules[mod]

    import slopegraph
    from slopegraph.renderer import slopegraph_plotly

    fig, segments = slopegraph_plotly([[1, 2], [3, 4]])
    assert len(segments) == 2
    assert "layout" in fig
    assert slopegraph.__version__

    assert not any(k.startswith("nicegui") for k in sys.modules.keys())
