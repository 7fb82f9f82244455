from importlib.metadata import requires


def test_mcp_is_held_below_2():
    mcp_reqs = [r for r in requires("mcp-dice-expr") or [] if r.replace(" ", "").startswith("mcp")]
    assert mcp_reqs
    assert all("<2" in r for r in mcp_reqs)
