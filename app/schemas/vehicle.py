# app/schemas/vehicle.py
from pydantic import BaseModel, Field, field_serializer, field_validator
from datetime import datetime
from typing import Optional

from app.models.vehicle import STATUS_ABSENT, STATUS_PRESENT
from app.utils.timeutils import format_utc, to_naive_utc


class VehicleBase(BaseModel):
    plate: str = Field(alias="placa", min_length=1, max_length=20)
    model: Optional[str] = Field(default=None, alias="modelo", max_length=100)
    make: Optional[str] = Field(default=None, alias="marca", max_length=100)
    color: Optional[str] = Field(default=None, alias="cor", max_length=50)

    @field_validator("plate")
    @classmethod
    def normalize_plate(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("placa must not be blank")
        return v

    class Config:
        populate_by_name = True


class VehicleCreate(VehicleBase):
    status: Optional[str] = None             # Presente | Ausente, defaults to Presente
    created_at: Optional[datetime] = Field(default=None, alias="dataCriacao")

    @field_validator("status")
    @classmethod
    def normalize_status(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        for known in (STATUS_PRESENT, STATUS_ABSENT):
            if v.strip().lower() == known.lower():
                return known
        raise ValueError(f"status must be {STATUS_PRESENT} or {STATUS_ABSENT}")

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, v):
        return to_naive_utc(v)


class VehicleUpdate(VehicleBase):
    pass


class VehicleOut(BaseModel):
    id: int
    plate: str = Field(alias="placa")
    model: Optional[str] = Field(default=None, alias="modelo")
    make: Optional[str] = Field(default=None, alias="marca")
    color: Optional[str] = Field(default=None, alias="cor")
    status: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="dataCriacao")
    last_movement_at: Optional[datetime] = Field(default=None, alias="ultimaMovimentacao")

    @field_serializer("created_at", "last_movement_at")
    def serialize_dt(self, v: Optional[datetime]):
        return format_utc(v)

    class Config:
        from_attributes = True
        populate_by_name = True
