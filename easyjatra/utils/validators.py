from typing import Optional

def normalize_email(v: Optional[str]) -> str:
    """Forme canonique d'un email: espaces retirés, tout en minuscules (partie locale comprise)."""
    return (v or "").strip().lower()
