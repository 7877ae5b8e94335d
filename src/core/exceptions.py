class ProxyError(Exception):
    """Base exception for proxy errors"""
    pass


class ValidationError(ProxyError):
    """Raised when caller-supplied input is missing or malformed"""
    pass


class UpstreamError(ProxyError):
    """Raised on transport failures, non-2xx statuses or unexpected payloads"""
    pass


class EmptyConversionError(UpstreamError):
    """Raised when the conversion service returns no output file"""
    pass
