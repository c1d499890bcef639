from connect.bridge.bridge import HostBridge
from connect.bridge.channel import CallbackChannel, Channel, Message, QueueChannel

__all__ = ["CallbackChannel", "Channel", "HostBridge", "Message", "QueueChannel"]
