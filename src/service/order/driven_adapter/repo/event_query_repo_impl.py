from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.order.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.order.domain.entity.event_entity import Event, Location, Show
from src.service.order.driven_adapter.model.event_model import EventModel, LocationModel, ShowModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def find_event_by_id(self, *, event_id: str) -> Event:
        result = await self.session.execute(select(EventModel).where(EventModel.id == event_id))
        db_event = result.scalar_one_or_none()
        if db_event is None:
            raise NotFoundError(f"event's properties with id '{event_id}' is not found")
        return Event(
            id=db_event.id,
            name=db_event.name,
            description=db_event.description,
            status=db_event.status,
            created_at=db_event.created_at,
            updated_at=db_event.updated_at,
        )

    @Logger.io
    async def find_show_by_id(self, *, show_id: str) -> Show:
        result = await self.session.execute(
            select(ShowModel, LocationModel)
            .outerjoin(LocationModel, LocationModel.show_id == ShowModel.id)
            .where(ShowModel.id == show_id)
        )
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(f"show's properties with id '{show_id}' is not found")

        db_show, db_location = row
        location = (
            Location(
                event_id=db_location.event_id,
                show_id=db_location.show_id,
                country=db_location.country,
                city=db_location.city,
                formatted_address=db_location.formatted_address,
                latitude=db_location.latitude,
                longitude=db_location.longitude,
            )
            if db_location is not None
            else None
        )
        return Show(
            id=db_show.id,
            event_id=db_show.event_id,
            venue=db_show.venue,
            type=db_show.type,
            time=db_show.time,
            status=db_show.status,
            location=location,
        )
