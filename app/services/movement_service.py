# app/services/movement_service.py
"""
Movement registration, history and per-vehicle lookups.

How registration works:
  - The vehicle named by the movement is resolved (404 if unknown)
  - An exit for a vehicle already "Ausente", or an entry for one already
    "Presente", contradicts the recorded status
  - Without forceCorrection the request is refused with CorrectionRequired (409)
    and nothing is written; the client asks the user and resends with the flag
  - With forceCorrection the missing opposite movement is inserted first,
    same driver/mileage/timestamp, then the requested one
  - The vehicle's status and last movement time follow the requested movement
"""

from datetime import date
from math import ceil
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.config import settings
from app.models.movement import Movement, TYPE_ENTRY, TYPE_EXIT
from app.models.vehicle import Vehicle, STATUS_PRESENT, STATUS_ABSENT
from app.schemas.movement import MovementCreate, MovementUpdate
from app.services.vehicle_service import get_vehicle
from app.utils.errors import CorrectionRequired, NotFoundError
from app.utils.timeutils import end_of_day, start_of_day, today_bounds, utcnow
from app.utils.logger import get_logger

logger = get_logger(__name__)

ACTION_AUTO_ENTRY = "entradaAutomatica"
ACTION_AUTO_EXIT = "saidaAutomatica"


def _status_is(vehicle: Vehicle, status: str) -> bool:
    return (vehicle.status or "").strip().lower() == status.lower()


def _auto_correction(vehicle: Vehicle, body: MovementCreate, movement_type: str) -> Movement:
    return Movement(
        vehicle=vehicle,
        driver=body.driver,
        mileage=body.mileage,
        movement_type=movement_type,
        moved_at=body.moved_at,
    )


def register_movement(db: Session, body: MovementCreate) -> Movement:
    vehicle = get_vehicle(db, body.vehicle.id)

    if body.moved_at is None:
        body.moved_at = utcnow()

    movement_type = body.movement_type.lower()

    if movement_type == TYPE_EXIT and _status_is(vehicle, STATUS_ABSENT):
        if not body.force_correction:
            logger.info(f"[MOVEMENT] Exit refused for {vehicle.plate}: vehicle is already absent")
            raise CorrectionRequired(
                "O veículo está AUSENTE. Deseja registrar uma ENTRADA automática?",
                ACTION_AUTO_ENTRY,
            )
        logger.warning(f"[MOVEMENT] Auto-correction: inserting ENTRY before EXIT for {vehicle.plate}")
        db.add(_auto_correction(vehicle, body, TYPE_ENTRY))

    elif movement_type == TYPE_ENTRY and _status_is(vehicle, STATUS_PRESENT):
        if not body.force_correction:
            logger.info(f"[MOVEMENT] Entry refused for {vehicle.plate}: vehicle is already present")
            raise CorrectionRequired(
                "O veículo está PRESENTE. Deseja registrar uma SAÍDA automática antes da ENTRADA?",
                ACTION_AUTO_EXIT,
            )
        logger.warning(f"[MOVEMENT] Auto-correction: inserting EXIT before ENTRY for {vehicle.plate}")
        db.add(_auto_correction(vehicle, body, TYPE_EXIT))

    vehicle.status = STATUS_PRESENT if movement_type == TYPE_ENTRY else STATUS_ABSENT
    vehicle.last_movement_at = body.moved_at
    body.force_correction = False

    movement = Movement(
        vehicle=vehicle,
        mileage=body.mileage,
        moved_at=body.moved_at,
        movement_type=movement_type,
        driver=body.driver,
        gate_guard=body.gate_guard,
    )
    db.add(movement)
    db.commit()
    db.refresh(movement)

    logger.info(
        f"[MOVEMENT] {movement_type.upper()} | Plate={vehicle.plate} | Driver={movement.driver} "
        f"| Km={movement.mileage} | Status={vehicle.status}"
    )
    return movement


def get_movement(db: Session, movement_id: int) -> Movement:
    movement = db.query(Movement).filter(Movement.id == movement_id).first()
    if not movement:
        raise NotFoundError(f"Movimentação não encontrada com o ID: {movement_id}")
    return movement


def update_movement(db: Session, movement_id: int, body: MovementUpdate) -> Movement:
    """
    Replace the editable fields of a movement. The vehicle's last movement
    time is re-synced to its latest movement; its status is not recomputed.
    """
    movement = get_movement(db, movement_id)
    movement.mileage = body.mileage
    movement.moved_at = body.moved_at
    movement.driver = body.driver
    movement.movement_type = body.movement_type
    movement.gate_guard = body.gate_guard
    db.flush()

    latest = (
        db.query(Movement)
        .filter(Movement.vehicle_id == movement.vehicle_id)
        .order_by(Movement.moved_at.desc(), Movement.id.desc())
        .first()
    )
    if latest is not None:
        movement.vehicle.last_movement_at = latest.moved_at

    db.commit()
    db.refresh(movement)
    logger.info(f"[MOVEMENT] Edited id={movement.id} vehicle={movement.vehicle_id}")
    return movement


def list_movements(
    db: Session,
    plate: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    page: int = 0,
    size: Optional[int] = None,
) -> dict:
    """Filtered movement history, newest first, in the paging shape the client expects."""
    size = min(size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)

    q = db.query(Movement)
    if plate:
        q = q.join(Movement.vehicle).filter(Vehicle.plate.ilike(f"%{plate.strip()}%"))
    if start_date:
        q = q.filter(Movement.moved_at >= start_of_day(start_date))
    if end_date:
        q = q.filter(Movement.moved_at < end_of_day(end_date))

    total = q.count()
    items = (
        q.order_by(Movement.moved_at.desc(), Movement.id.desc())
        .offset(page * size)
        .limit(size)
        .all()
    )
    total_pages = ceil(total / size) if total else 0
    return {
        "content": items,
        "totalElements": total,
        "totalPages": total_pages,
        "number": page,
        "size": size,
        "numberOfElements": len(items),
        "first": page == 0,
        "last": page >= total_pages - 1,
        "empty": not items,
    }


def count_today(db: Session, movement_type: str) -> int:
    start, end = today_bounds()
    return db.query(func.count(Movement.id)).filter(
        Movement.movement_type == movement_type,
        Movement.moved_at >= start,
        Movement.moved_at < end,
    ).scalar() or 0


def count_entries_today(db: Session) -> int:
    return count_today(db, TYPE_ENTRY)


def count_exits_today(db: Session) -> int:
    return count_today(db, TYPE_EXIT)


def last_mileage(db: Session, vehicle_id: int) -> Optional[float]:
    row = (
        db.query(Movement.mileage)
        .filter(Movement.vehicle_id == vehicle_id)
        .order_by(Movement.id.desc())
        .first()
    )
    return row[0] if row else None


def last_driver(db: Session, vehicle_id: int) -> Optional[str]:
    row = (
        db.query(Movement.driver)
        .filter(Movement.vehicle_id == vehicle_id)
        .order_by(Movement.id.desc())
        .first()
    )
    return row[0] if row else None


def list_drivers() -> list[str]:
    return list(settings.DRIVERS)
