"""
Helpers de normalisation des réponses PostgREST.
- first_row: première ligne renvoyée par insert/update/select (ou None).
- insert_result / update_result: corps JSON renvoyés au front pour les écritures
  ({acknowledged, insertedId} et {acknowledged, matchedCount, modifiedCount}).
"""
from typing import Any, Dict, List, Optional

UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"

def rows_of(res) -> List[Dict[str, Any]]:
    data = getattr(res, "data", None)
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        return [data]
    return []

def first_row(res) -> Optional[Dict[str, Any]]:
    rows = rows_of(res)
    return rows[0] if rows else None

def is_unique_violation(exc: Exception) -> bool:
    """True si l'erreur PostgREST correspond à une contrainte UNIQUE violée."""
    return str(getattr(exc, "code", "") or "") == UNIQUE_VIOLATION

def is_invalid_identifier(exc: Exception) -> bool:
    """True si l'identifiant fourni n'a pas le format de la colonne (ex: uuid mal formé)."""
    return str(getattr(exc, "code", "") or "") == INVALID_TEXT_REPRESENTATION

def insert_result(row: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {"acknowledged": row is not None, "insertedId": (row or {}).get("id")}

def update_result(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"acknowledged": True, "matchedCount": len(rows), "modifiedCount": len(rows)}
