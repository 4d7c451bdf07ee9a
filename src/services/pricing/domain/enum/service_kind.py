from enum import Enum


class ServiceKind(str, Enum):
    """料金計算の種別"""

    TRANSFER = "transfer"
    CHAUFFEUR = "chauffeur"
    TOUR = "tour"
