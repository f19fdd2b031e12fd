from .load import TableOptions, load_options, dump_options

__all__ = [
    "TableOptions",
    "load_options",
    "dump_options",
]
