from errorconf.lib.remote.codecs import decode_entries, load_entries, parse_entries

__all__ = ["decode_entries", "load_entries", "parse_entries"]
