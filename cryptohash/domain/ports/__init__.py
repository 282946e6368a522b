from .digest_provider_port import DigestProviderPort

__all__ = [
    "DigestProviderPort",
]
