from objtasks.serialization.json_bridge import bind, parse, restore_typed, serialize

__all__ = ["serialize", "parse", "bind", "restore_typed"]
