"""Client for a verifiable credential issuance and presentation request service"""

__version__ = "0.1.0"
