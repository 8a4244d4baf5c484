from .gematria import decode, encode, is_canonical_gimatria

__all__ = ["decode", "encode", "is_canonical_gimatria"]
