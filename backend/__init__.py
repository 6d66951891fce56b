"""HexMap HTTP backend."""
