"""
Basic options: construction, chaining, extraction and narrowing.

Run: python examples/basic_options.py
"""
from optionpy import Some, NONE, from_nullable, ConsoleLogger, trace
from optionpy import combinators as op


CONFIG = {"port": "8080", "host": "", "debug": None}


def setting(name: str):
    return from_nullable(CONFIG.get(name))


def main():
    logger = ConsoleLogger("example", level="DEBUG")

    # map/filter/or_else: missing and empty values fall back
    port = trace(setting("port").map(int), "port", logger).or_else(80)
    host = setting("host").filter(bool).or_else("localhost")
    print(f"listening on {host}:{port}")

    # match: unwrap with a fallback in one step
    print("debug flag:", setting("debug").match(lambda v: v == "1", False))

    # free-function form
    print("name length:", op.match(op.from_nullable("Hello World"), len, 0))

    # narrowing
    print("as int:", Some(3).safe_cast(int), "as str:", Some(3).safe_cast(str))

    # collections
    print("all set:", op.sequence([setting("port"), setting("host")]))
    print("any set:", op.first_some([setting("debug"), setting("port")]))
    print("nothing:", NONE)


if __name__ == "__main__":
    main()
