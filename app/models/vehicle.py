# app/models/vehicle.py
"""
Registered vehicles table.
status and last_movement_at are owned by movement_service: they change
when a movement is registered, never through the vehicle endpoints.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base

STATUS_PRESENT = "Presente"
STATUS_ABSENT = "Ausente"


class Vehicle(Base):
    __tablename__ = "veiculos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate = Column("placa", String(20), unique=True, nullable=False, index=True)
    model = Column("modelo", String(100))
    make = Column("marca", String(100))
    color = Column("cor", String(50))
    status = Column(String(20), nullable=False, default=STATUS_PRESENT, server_default=STATUS_PRESENT)
    created_at = Column("data_criacao", DateTime)
    last_movement_at = Column("ultima_movimentacao", DateTime, index=True)

    movements = relationship(
        "Movement",
        back_populates="vehicle",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Vehicle {self.plate} status={self.status}>"
