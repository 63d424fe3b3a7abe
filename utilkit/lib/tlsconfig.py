"""
TLS server context construction.
"""

import ssl
from pathlib import Path
from utilkit.lib.log import LOG


def tlsConfig_load(
    cert_file: str | Path,
    key_file: str | Path,
    ca_file: str | Path = "",
    client_auth: bool = False,
) -> ssl.SSLContext:
    """Create a server TLS context from PEM certificate and key files.

    Args:
        cert_file: Path to the certificate (PEM)
        key_file: Path to the private key (PEM)
        ca_file: Optional CA bundle (PEM) used to verify client certificates
        client_auth: Require a client certificate (otherwise verify if given)

    Returns:
        ssl.SSLContext enforcing TLS 1.2 or newer

    Raises:
        OSError: If a file cannot be read
        ssl.SSLError: If the certificate and key cannot be loaded
    """
    context: ssl.SSLContext = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    context.load_cert_chain(certfile=cert_file, keyfile=key_file)

    if ca_file:
        ca_pem: str = Path(ca_file).read_text(encoding="utf-8")
        try:
            context.load_verify_locations(cadata=ca_pem)
        except (ssl.SSLError, ValueError) as e:
            LOG(f"Failed to append CA certs from PEM {ca_file}: {e}", level="WARNING")
        context.verify_mode = (
            ssl.CERT_REQUIRED if client_auth else ssl.CERT_OPTIONAL
        )

    return context
