from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ticket_booking.models.domain import Ticket, Train, User


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TrainSchema(CamelModel):
    train_id: str = Field(alias="trainId")
    train_no: str = Field(alias="trainNo")
    seats: List[List[int]] = Field(default_factory=list)
    station_times: Dict[str, str] = Field(default_factory=dict, alias="stationTimes")
    stations: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, obj: Train) -> "TrainSchema":
        return cls(
            train_id=obj.train_id,
            train_no=obj.train_no,
            seats=obj.seats,
            station_times=obj.station_times,
            stations=obj.stations,
        )

    def to_domain(self) -> Train:
        return Train(
            train_id=self.train_id,
            train_no=self.train_no,
            seats=[list(row) for row in self.seats],
            station_times=dict(self.station_times),
            stations=list(self.stations),
        )


class TicketSchema(CamelModel):
    ticket_id: str = Field(alias="ticketId")
    user_id: str = Field(alias="userId")
    source: str
    destination: str
    date_of_travel: str = Field(alias="dateOfTravel")
    train: Optional[TrainSchema] = None

    @classmethod
    def from_domain(cls, obj: Ticket) -> "TicketSchema":
        return cls(
            ticket_id=obj.ticket_id,
            user_id=obj.user_id,
            source=obj.source,
            destination=obj.destination,
            date_of_travel=obj.date_of_travel,
            train=TrainSchema.from_domain(obj.train) if obj.train else None,
        )

    def to_domain(self) -> Ticket:
        return Ticket(
            ticket_id=self.ticket_id,
            user_id=self.user_id,
            source=self.source,
            destination=self.destination,
            date_of_travel=self.date_of_travel,
            train=self.train.to_domain() if self.train else None,
        )


class UserSchema(CamelModel):
    name: str
    password: Optional[str] = None
    hashed_password: str = Field(alias="hashedPassword")
    tickets_booked: List[TicketSchema] = Field(default_factory=list, alias="ticketsBooked")
    user_id: str = Field(alias="userId")

    @classmethod
    def from_domain(cls, obj: User) -> "UserSchema":
        return cls(
            name=obj.name,
            password=obj.password,
            hashed_password=obj.hashed_password,
            tickets_booked=[TicketSchema.from_domain(t) for t in obj.tickets_booked],
            user_id=obj.user_id,
        )

    def to_domain(self) -> User:
        return User(
            name=self.name,
            password=self.password,
            hashed_password=self.hashed_password,
            tickets_booked=[t.to_domain() for t in self.tickets_booked],
            user_id=self.user_id,
        )
