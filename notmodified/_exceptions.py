__all__ = ("DigestError", "DigestUnavailableError")


class DigestError(Exception): ...


class DigestUnavailableError(DigestError): ...
