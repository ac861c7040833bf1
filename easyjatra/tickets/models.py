"""
Schémas d'entrée pour la publication d'un ticket par un vendeur.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

class VendorInfo(BaseModel):
    id: Optional[str] = None
    email: Optional[EmailStr] = None
    name: Optional[str] = None

class TicketIn(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(gt=0)
    quantity: int = Field(ge=0)
    image: Optional[str] = None
    description: Optional[str] = None
    vendor: Optional[VendorInfo] = None
