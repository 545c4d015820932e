from stylescope.parser.declarations import parse_declarations

__all__ = ["parse_declarations"]
