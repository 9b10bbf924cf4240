"""Small networking lab tools: CRC codewords, TCP and UDP clients and servers, and a UDP packet sender."""

__version__ = "0.1.0"
__all__ = ["crc", "sendudp", "tcp_client", "tcp_server", "udp_client", "udp_server"]