"""
JSON_checker pass3 test from json.org test suite.

Validates parsing of nested object structure with proper
handling of string keys and values.
"""

import jstream

# from https://json.org/JSON_checker/test/pass3.json
JSON = r"""
{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}
"""


def test_parse() -> None:
    """
    Validates JSON parsing and round-trip encoding for nested objects.

    Tests the parser's handling of nested object structure with string keys
    and values, and that sorted pretty output reproduces the layout.
    """
    res = jstream.loads(JSON)

    out = jstream.dumps(res)
    assert res == jstream.loads(out)

    pretty = jstream.dumps(res, pretty=True, indent=4, sort_keys=True)
    assert pretty == (
        "{\n"
        '    "JSON Test Pattern pass3": {\n'
        '        "In this test": "It is an object.",\n'
        '        "The outermost value": "must be an object or array."\n'
        "    }\n"
        "}"
    )
