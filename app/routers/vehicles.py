# app/routers/vehicles.py
"""Vehicle registry: CRUD plus presence lists and counters for the dashboard."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from app.services import vehicle_service
from app.utils.errors import NotFoundError

router = APIRouter(prefix="/veiculos")


@router.post("", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Register a new vehicle")
def register_vehicle(body: VehicleCreate, db: Session = Depends(get_db)):
    return vehicle_service.create_vehicle(db, body)


@router.get("", response_model=list[VehicleOut], summary="List registered vehicles")
def list_vehicles(db: Session = Depends(get_db)):
    return vehicle_service.list_vehicles(db)


@router.get("/count", response_model=int, summary="Total registered vehicles")
def count_vehicles(db: Session = Depends(get_db)):
    return vehicle_service.count_vehicles(db)


@router.get("/presentes/count", response_model=int, summary="Vehicles currently on site")
def count_present(db: Session = Depends(get_db)):
    return vehicle_service.count_present(db)


@router.get("/presentes", response_model=list[VehicleOut], summary="Vehicles on site, latest movement first")
def list_present(db: Session = Depends(get_db)):
    return vehicle_service.list_present(db)


@router.get("/ausentes", response_model=list[VehicleOut], summary="Vehicles off site, latest movement first")
def list_absent(db: Session = Depends(get_db)):
    return vehicle_service.list_absent(db)


@router.get("/placa/{plate}", response_model=VehicleOut, summary="Look up a plate")
def lookup_plate(plate: str, db: Session = Depends(get_db)):
    vehicle = vehicle_service.lookup_vehicle_by_plate(db, plate)
    if not vehicle:
        raise NotFoundError(f"Veículo não encontrado com a placa: {plate}")
    return vehicle


@router.get("/{vehicle_id}", response_model=VehicleOut, summary="Get a vehicle")
def get_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    return vehicle_service.get_vehicle(db, vehicle_id)


@router.put("/{vehicle_id}", response_model=VehicleOut, summary="Update plate, make, model and color")
def update_vehicle(vehicle_id: int, body: VehicleUpdate, db: Session = Depends(get_db)):
    return vehicle_service.update_vehicle(db, vehicle_id, body)


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a vehicle")
def delete_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    vehicle_service.delete_vehicle(db, vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
