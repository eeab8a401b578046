# app/routers/movements.py
"""Entry/exit registration, history and per-vehicle lookups."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.movement import (
    LastDriverOut, MovementCreate, MovementOut, MovementPage, MovementUpdate,
)
from app.services import movement_service

router = APIRouter(prefix="/movimentacoes")


@router.post(
    "",
    response_model=MovementOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register an entry or exit",
    responses={409: {"description": "Movement contradicts the vehicle status; resend with forceCorrection=true"}},
)
def register_movement(body: MovementCreate, db: Session = Depends(get_db)):
    return movement_service.register_movement(db, body)


@router.get("", response_model=MovementPage, summary="Movement history with filters")
def list_movements(
    plate: Optional[str] = Query(default=None, alias="placa"),
    start_date: Optional[date] = Query(default=None, alias="dataInicio"),
    end_date: Optional[date] = Query(default=None, alias="dataFim"),
    page: int = Query(default=0, ge=0),
    size: Optional[int] = Query(default=None, ge=1),
    db: Session = Depends(get_db),
):
    """Newest first. dataFim includes the whole day."""
    return movement_service.list_movements(db, plate, start_date, end_date, page, size)


@router.get("/entradas-hoje", response_model=int, summary="Entries registered today")
def count_entries_today(db: Session = Depends(get_db)):
    return movement_service.count_entries_today(db)


@router.get("/saidas-hoje", response_model=int, summary="Exits registered today")
def count_exits_today(db: Session = Depends(get_db)):
    return movement_service.count_exits_today(db)


@router.get("/motoristas", response_model=list[str], summary="Driver roster")
def list_drivers():
    return movement_service.list_drivers()


@router.get("/veiculo/{vehicle_id}/ultima-quilometragem", response_model=Optional[float],
            summary="Mileage of the vehicle's latest movement")
def get_last_mileage(vehicle_id: int, db: Session = Depends(get_db)):
    return movement_service.last_mileage(db, vehicle_id)


@router.get("/veiculo/{vehicle_id}/ultimo-motorista", response_model=LastDriverOut,
            summary="Driver of the vehicle's latest movement")
def get_last_driver(vehicle_id: int, db: Session = Depends(get_db)):
    return {"motorista": movement_service.last_driver(db, vehicle_id) or ""}


@router.get("/{movement_id}", response_model=MovementOut, summary="Get a movement")
def get_movement(movement_id: int, db: Session = Depends(get_db)):
    return movement_service.get_movement(db, movement_id)


@router.put("/{movement_id}", response_model=MovementOut, summary="Edit a movement")
def update_movement(movement_id: int, body: MovementUpdate, db: Session = Depends(get_db)):
    return movement_service.update_movement(db, movement_id, body)
