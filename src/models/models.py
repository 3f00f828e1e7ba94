# src/models/models.py

import uuid
import enum
from datetime import datetime, timezone

from sqlalchemy import (
    JSON, Boolean, Column, Date, DateTime, Float, Integer, String, Text,
    Enum as SAEnum,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# ENUMS
# ============================================================================

class IdentityRole(enum.Enum):
    USER = "user"
    NURSE = "nurse"


class ServiceRequestStatus(enum.Enum):
    PENDING = "pendiente"
    IN_PROGRESS = "en_progreso"
    COMPLETED = "completado"


class SupportUserType(enum.Enum):
    USER = "usuario"
    NURSE = "enfermero"


# ============================================================================
# IDENTITY MODELS
# ============================================================================

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    name = Column(String(200), nullable=False)
    user_name = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    foto = Column(String(500), nullable=True)
    verificado = Column(String(10), nullable=False, default="No")
    comida_favorita = Column(String(200), nullable=False, default="No especificada")
    descuento_navideno = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, user_name={self.user_name})>"


class Nurse(Base):
    __tablename__ = "nurses"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    name = Column(String(200), nullable=False)
    user_name = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    fecha_nacimiento = Column(String(20), nullable=False)
    genero = Column(String(20), nullable=False)
    descripcion = Column(Text, nullable=True)
    especialidad = Column(String(200), nullable=False, index=True)
    ubicacion = Column(String(200), nullable=False, index=True)
    tarifa = Column(Float, nullable=False)
    disponibilidad = Column(JSON, nullable=False, default=list)
    certificados = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<Nurse(id={self.id}, user_name={self.user_name}, especialidad={self.especialidad})>"


class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    usuario_id = Column(String(36), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    fecha_nacimiento = Column(String(20), nullable=False)
    genero = Column(String(20), nullable=False)
    movilidad = Column(String(200), nullable=False)
    descripcion = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


# ============================================================================
# SERVICE REQUEST WORKFLOW
# ============================================================================

class ServiceRequest(Base):
    __tablename__ = "service_requests"

    # user_id, nurse_id and patient_ids are plain references: no foreign keys
    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    user_id = Column(String(36), nullable=False, index=True)
    nurse_id = Column(String(36), nullable=False, index=True)
    patient_ids = Column(JSON, nullable=False, default=list)
    estado = Column(SAEnum(ServiceRequestStatus), nullable=False, default=ServiceRequestStatus.PENDING)
    detalles = Column(Text, nullable=False)
    fecha = Column(Date, nullable=False)
    tarifa = Column(Float, nullable=False, default=0)
    pago_realizado = Column(Boolean, nullable=False, default=False)
    pago_liberado = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<ServiceRequest(id={self.id}, estado={self.estado.value})>"


class Message(Base):
    __tablename__ = "messages"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    service_request_id = Column(String(36), nullable=False, index=True)
    sender_id = Column(String(36), nullable=False)
    receiver_id = Column(String(36), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class Review(Base):
    __tablename__ = "reviews"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    user_id = Column(String(36), nullable=False, index=True)
    nurse_id = Column(String(36), nullable=False, index=True)
    service_request_id = Column(String(36), nullable=False, index=True)
    calificacion = Column(Integer, nullable=False)
    comentario = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    nurse_id = Column(String(36), nullable=False, index=True)
    user_id = Column(String(36), nullable=False)
    service_request_id = Column(String(36), nullable=False, index=True)
    monto = Column(Float, nullable=False)
    fecha_pago = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    estado = Column(String(30), nullable=False, default="completado")


# ============================================================================
# SUPPORT
# ============================================================================

class SupportRequest(Base):
    __tablename__ = "support_requests"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    user_id = Column(String(36), nullable=False, index=True)
    tipo_usuario = Column(SAEnum(SupportUserType), nullable=False)
    asunto = Column(String(300), nullable=False)
    mensaje = Column(Text, nullable=False)
    estado = Column(String(30), nullable=False, default="pendiente")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class FAQ(Base):
    __tablename__ = "faqs"

    id = Column(String(36), primary_key=True, default=_new_id, nullable=False)
    pregunta = Column(Text, nullable=False)
    respuesta = Column(Text, nullable=False)
