from infonclient.transports.tcp.transport import TcpTransport

__all__ = ["TcpTransport"]
