"""Local HTTP mock of the NS1 REST API that answers from registered test cases."""

__all__ = ["cases", "dns_cases", "service"]