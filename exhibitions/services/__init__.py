from exhibitions.services.exhibition_service import ExhibitionService
from exhibitions.services.exhibitor_service import AuthResult, ExhibitorService
from exhibitions.services.public_service import PublicExhibitionService
from exhibitions.services.tokens import TokenIssuer

__all__ = [
    "AuthResult",
    "ExhibitionService",
    "ExhibitorService",
    "PublicExhibitionService",
    "TokenIssuer",
]
