# app/schemas/movement.py
from pydantic import BaseModel, Field, field_serializer, field_validator
from datetime import datetime
from typing import Optional

from app.models.movement import MOVEMENT_TYPES
from app.schemas.vehicle import VehicleOut
from app.utils.timeutils import format_utc, to_naive_utc


class VehicleRef(BaseModel):
    """The client sends the whole vehicle object; only its id is used."""
    id: int

    class Config:
        extra = "ignore"


class MovementFields(BaseModel):
    mileage: Optional[float] = Field(default=None, alias="quilometragem", ge=0)
    moved_at: Optional[datetime] = Field(default=None, alias="dataHora")
    movement_type: str = Field(alias="tipoMovimento")
    driver: Optional[str] = Field(default=None, alias="motorista", max_length=200)
    gate_guard: Optional[str] = Field(default=None, alias="porteiro", max_length=200)

    @field_validator("movement_type")
    @classmethod
    def normalize_type(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in MOVEMENT_TYPES:
            raise ValueError(f"tipoMovimento must be one of {', '.join(MOVEMENT_TYPES)}")
        return v

    @field_validator("moved_at")
    @classmethod
    def as_utc(cls, v):
        return to_naive_utc(v)

    class Config:
        populate_by_name = True


class MovementCreate(MovementFields):
    vehicle: VehicleRef = Field(alias="veiculo")
    force_correction: Optional[bool] = Field(default=False, alias="forceCorrection")


class MovementUpdate(MovementFields):
    moved_at: datetime = Field(alias="dataHora")


class MovementOut(BaseModel):
    id: int
    mileage: Optional[float] = Field(default=None, alias="quilometragem")
    moved_at: datetime = Field(alias="dataHora")
    movement_type: str = Field(alias="tipoMovimento")
    driver: Optional[str] = Field(default=None, alias="motorista")
    gate_guard: Optional[str] = Field(default=None, alias="porteiro")
    vehicle: VehicleOut = Field(alias="veiculo")

    @field_serializer("moved_at")
    def serialize_dt(self, v: datetime):
        return format_utc(v)

    class Config:
        from_attributes = True
        populate_by_name = True


class MovementPage(BaseModel):
    """Page of history rows, shaped like the paging object the web client reads."""
    content: list[MovementOut]
    totalElements: int
    totalPages: int
    number: int
    size: int
    numberOfElements: int
    first: bool
    last: bool
    empty: bool


class LastDriverOut(BaseModel):
    motorista: str
