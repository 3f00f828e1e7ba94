"""
Database seed script for the Sonwi API.
Creates the FAQ entries and a demo user, nurse and patient.

Usage:
    python -m src.seed.seed [--clear]
"""

import argparse
import asyncio
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.auth_service import hash_password
from src.common.config import settings
from src.common.database.database import async_session, engine
from src.common.utils.logger import configure_logging
from src.models.models import Base, FAQ, Nurse, Patient, User

logger = logging.getLogger(__name__)

FAQS = [
    ("¿Cómo contrato a un enfermero?",
     "Busca enfermeros por especialidad, ubicación y tarifa y crea una solicitud de servicio."),
    ("¿Cuándo se libera el pago al enfermero?",
     "Cuando la solicitud de servicio está completada y el pago fue realizado."),
    ("¿Puedo calificar a un enfermero?",
     "Sí, una vez que el servicio haya sido completado."),
    ("¿Cómo contacto al enfermero asignado?",
     "Desde la mensajería de la solicitud de servicio."),
]


class DatabaseSeeder:
    def __init__(self):
        self.user_id = None
        self.nurse_id = None

    async def clear_database(self, session: AsyncSession):
        """Remove the rows this script creates."""
        logger.info("Clearing seeded data...")
        for model in (FAQ, Patient, Nurse, User):
            await session.execute(delete(model))
        await session.commit()

    async def seed_faqs(self, session: AsyncSession):
        existing = await session.execute(select(FAQ.id).limit(1))
        if existing.first() is not None:
            logger.info("FAQ entries already present, skipping")
            return
        session.add_all([FAQ(pregunta=q, respuesta=a) for q, a in FAQS])
        await session.commit()
        logger.info("Seeded %d FAQ entries", len(FAQS))

    async def seed_identities(self, session: AsyncSession):
        result = await session.execute(select(User).where(User.user_name == "demo_usuario"))
        user = result.scalars().first()
        new_user = user is None
        if new_user:
            user = User(name="Usuario Demo", user_name="demo_usuario", password_hash=hash_password("demo1234"))
            session.add(user)

        result = await session.execute(select(Nurse).where(Nurse.user_name == "demo_enfermero"))
        nurse = result.scalars().first()
        if nurse is None:
            nurse = Nurse(
                name="Enfermera Demo",
                user_name="demo_enfermero",
                password_hash=hash_password("demo1234"),
                fecha_nacimiento="1990-05-14",
                genero="F",
                especialidad="Geriatría",
                ubicacion="Lima",
                tarifa=30,
                disponibilidad=[{"dia": "Lunes", "horaInicio": "08:00", "horaFin": "17:00"}],
                certificados=["RCP"],
            )
            session.add(nurse)
        await session.flush()

        self.user_id, self.nurse_id = user.id, nurse.id
        if new_user:
            session.add(Patient(
                usuario_id=user.id,
                name="Paciente Demo",
                fecha_nacimiento="1945-02-01",
                genero="M",
                movilidad="Silla de ruedas",
                descripcion="Requiere asistencia diaria",
            ))
        await session.commit()
        logger.info("Seeded demo user %s and nurse %s", self.user_id, self.nurse_id)

    async def run_all(self, session: AsyncSession, clear: bool = False):
        if clear:
            await self.clear_database(session)
        await self.seed_faqs(session)
        await self.seed_identities(session)
        logger.info("Seeding complete")


# --- Runner ---
async def main(clear: bool = False):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    seeder = DatabaseSeeder()
    async with async_session() as session:
        try:
            await seeder.run_all(session, clear=clear)
        except Exception:
            logger.exception("Error during seeding")
            await session.rollback()
            raise
        finally:
            await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the Sonwi database")
    parser.add_argument("--clear", action="store_true", help="Clear seeded data first")
    args = parser.parse_args()
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(main(clear=args.clear))
