# app/services/vehicle_service.py
"""
Vehicle registration and lookup helpers.
Used by the vehicles router and by movement_service to resolve vehicles.
"""

from sqlalchemy.orm import Session
from app.models.vehicle import Vehicle, STATUS_PRESENT, STATUS_ABSENT
from app.schemas.vehicle import VehicleCreate, VehicleUpdate
from app.utils.errors import BusinessRuleError, NotFoundError
from app.utils.timeutils import utcnow
from app.utils.logger import get_logger

logger = get_logger(__name__)


def lookup_vehicle_by_plate(db: Session, plate: str):
    """Find a registered vehicle by plate. Returns None if not found."""
    return db.query(Vehicle).filter(Vehicle.plate == plate.strip().upper()).first()


def get_vehicle(db: Session, vehicle_id: int) -> Vehicle:
    vehicle = db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
    if not vehicle:
        raise NotFoundError(f"Veículo não encontrado com o ID: {vehicle_id}")
    return vehicle


def _ensure_plate_free(db: Session, plate: str, vehicle_id: int = None):
    existing = lookup_vehicle_by_plate(db, plate)
    if existing and existing.id != vehicle_id:
        raise BusinessRuleError(f"Placa {plate} já cadastrada")


def create_vehicle(db: Session, body: VehicleCreate) -> Vehicle:
    _ensure_plate_free(db, body.plate)
    vehicle = Vehicle(
        plate=body.plate,
        model=body.model,
        make=body.make,
        color=body.color,
        status=body.status or STATUS_PRESENT,
        created_at=body.created_at or utcnow(),
    )
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    logger.info(f"[VEHICLE] Registered {vehicle.plate} (id={vehicle.id}, status={vehicle.status})")
    return vehicle


def update_vehicle(db: Session, vehicle_id: int, body: VehicleUpdate) -> Vehicle:
    """Replace the descriptive fields. Status is left to movement registration."""
    vehicle = get_vehicle(db, vehicle_id)
    _ensure_plate_free(db, body.plate, vehicle_id)
    vehicle.plate = body.plate
    vehicle.make = body.make
    vehicle.model = body.model
    vehicle.color = body.color
    db.commit()
    db.refresh(vehicle)
    logger.info(f"[VEHICLE] Updated id={vehicle.id} plate={vehicle.plate}")
    return vehicle


def delete_vehicle(db: Session, vehicle_id: int):
    vehicle = get_vehicle(db, vehicle_id)
    plate = vehicle.plate
    db.delete(vehicle)
    db.commit()
    logger.info(f"[VEHICLE] Deleted id={vehicle_id} plate={plate} with its movement history")


def list_vehicles(db: Session) -> list[Vehicle]:
    return db.query(Vehicle).order_by(Vehicle.plate).all()


def list_by_status(db: Session, status: str) -> list[Vehicle]:
    """Vehicles with the given status, most recently moved first."""
    return (
        db.query(Vehicle)
        .filter(Vehicle.status == status)
        .order_by(Vehicle.last_movement_at.desc().nulls_last(), Vehicle.id.desc())
        .all()
    )


def list_present(db: Session) -> list[Vehicle]:
    return list_by_status(db, STATUS_PRESENT)


def list_absent(db: Session) -> list[Vehicle]:
    return list_by_status(db, STATUS_ABSENT)


def count_vehicles(db: Session) -> int:
    return db.query(Vehicle).count()


def count_present(db: Session) -> int:
    return db.query(Vehicle).filter(Vehicle.status == STATUS_PRESENT).count()
