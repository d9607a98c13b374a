import structlog

from clinic_core.core.application.cqrs import CommandHandler
from clinic_core.core.application.services.room_window import appointment_window
from clinic_core.core.domain.events.events import RoomAllocatedEvent, RoomDeallocatedEvent
from clinic_core.core.domain.repositories.appointment_repository import AppointmentRepository
from clinic_core.core.domain.repositories.room_scheduling_gateway import (
    RoomAllocationResult,
    RoomSchedulingError,
    RoomSchedulingGateway,
)
from clinic_core.core.domain.services.event_dispatcher import EventDispatcher
from config import settings

from ..commands.room_commands import AllocateRoomCommand, DeallocateRoomCommand

logger = structlog.get_logger(__name__)


class AllocateRoomHandler(CommandHandler[AllocateRoomCommand]):
    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        gateway: RoomSchedulingGateway,
        dispatcher: EventDispatcher,
        tz_name: str = settings.CLINIC_TIMEZONE,
    ):
        self.appointment_repo = appointment_repo
        self.gateway = gateway
        self.dispatcher = dispatcher
        self.tz_name = tz_name

    def handle(self, cmd: AllocateRoomCommand) -> RoomAllocationResult:
        appointment = self.appointment_repo.find_by_id(cmd.appointment_id)
        if appointment is None:
            raise ValueError(f"Consulta não encontrada para id={cmd.appointment_id}")
        professional_id = cmd.professional_id or appointment.doctor_id
        if not professional_id:
            raise ValueError(f"Consulta {cmd.appointment_id} sem profissional para ensalamento")

        start, end = appointment_window(appointment, self.tz_name)
        try:
            result = self.gateway.allocate(appointment.id, professional_id, start, end)
        except RoomSchedulingError:
            raise
        except Exception as exc:
            logger.error("room.allocate_failed", appointment_id=appointment.id, error=str(exc))
            raise RoomSchedulingError(f"Erro no ensalamento (allocate): {exc}") from exc

        if result.success:
            self.dispatcher.dispatch(
                RoomAllocatedEvent(
                    appointment_id=appointment.id,
                    professional_id=professional_id,
                    room_id=result.room_id,
                    start=start,
                    end=end,
                )
            )
        else:
            logger.warning("room.allocate_rejected", appointment_id=appointment.id, message=result.message)
        return result


class DeallocateRoomHandler(CommandHandler[DeallocateRoomCommand]):
    def __init__(self, gateway: RoomSchedulingGateway, dispatcher: EventDispatcher):
        self.gateway = gateway
        self.dispatcher = dispatcher

    def handle(self, cmd: DeallocateRoomCommand) -> bool:
        try:
            released = self.gateway.deallocate(cmd.appointment_id)
        except RoomSchedulingError:
            raise
        except Exception as exc:
            logger.error("room.deallocate_failed", appointment_id=cmd.appointment_id, error=str(exc))
            raise RoomSchedulingError(f"Erro no ensalamento (deallocate): {exc}") from exc
        if released:
            self.dispatcher.dispatch(RoomDeallocatedEvent(appointment_id=cmd.appointment_id))
        return released
