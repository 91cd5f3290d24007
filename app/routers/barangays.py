"""Barangay reference data for the registration form and map (read-only)."""
from fastapi import APIRouter
from app.constants import BARANGAY_COORDINATES, MIDSALIP_CENTER

router = APIRouter(prefix="/barangays", tags=["barangays"])


@router.get("")
def list_barangays():
    return {
        "center": MIDSALIP_CENTER,
        "barangays": [{"name": name, **coords} for name, coords in BARANGAY_COORDINATES.items()],
    }
