# app/models/movement.py
"""
Movement log table: one row per vehicle entry ("entrada") or exit ("saida").
Rows are also inserted as auto-corrections when a registration contradicts
the vehicle's current status and the client confirmed the fix.
"""

from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

TYPE_ENTRY = "entrada"
TYPE_EXIT = "saida"
MOVEMENT_TYPES = (TYPE_ENTRY, TYPE_EXIT)


class Movement(Base):
    __tablename__ = "movimentacoes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    mileage = Column("quilometragem", Float)
    moved_at = Column("data_hora", DateTime, nullable=False, index=True)
    movement_type = Column("tipo_movimento", String(10), nullable=False)  # entrada | saida
    driver = Column("motorista", String(200))
    gate_guard = Column("porteiro", String(200))
    vehicle_id = Column(
        "veiculo_id", Integer, ForeignKey("veiculos.id", ondelete="CASCADE"), nullable=False, index=True
    )

    vehicle = relationship("Vehicle", back_populates="movements")

    def __repr__(self):
        return f"<Movement {self.id} vehicle={self.vehicle_id} type={self.movement_type}>"
