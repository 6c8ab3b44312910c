from .chat_message_repository import ChatMessageRepositoryProtocol
from .tutor_gateway import TutorGatewayProtocol

__all__ = ["ChatMessageRepositoryProtocol", "TutorGatewayProtocol"]
