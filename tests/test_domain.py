from conftest import make_train
from ticket_booking.models.domain import Ticket, User


def _user_with_tickets(*ticket_ids: str) -> User:
    user = User(name="john_doe", hashed_password="hash", user_id="USER123")
    for ticket_id in ticket_ids:
        user.add_ticket(Ticket(ticket_id, "USER123", "A", "B", "2025-10-15"))
    return user


def test_train_seat_queries():
    train = make_train()

    assert train.available_seat_count() == 6
    assert train.is_seat_available(0, 0)
    assert not train.is_seat_available(0, 2)
    assert not train.is_seat_available(5, 0)
    assert not train.is_seat_available(0, -1)


def test_train_info_contains_identifiers():
    info = make_train().get_train_info()
    assert "T001" in info
    assert "12345" in info


def test_ticket_info_contains_route_and_date():
    ticket = Ticket("TICKET001", "USER123", "bangalore", "delhi", "2025-10-15", make_train())
    info = ticket.get_ticket_info()
    for part in ["TICKET001", "USER123", "bangalore", "delhi", "2025-10-15"]:
        assert part in info


def test_ticket_may_have_no_train():
    ticket = Ticket("TICKET002", "USER456", "jaipur", "agra", "2025-11-20")
    assert ticket.train is None


def test_remove_ticket_keeps_order():
    user = _user_with_tickets("T1", "T2", "T3")

    assert user.remove_ticket("T2")
    assert [t.ticket_id for t in user.tickets_booked] == ["T1", "T3"]
    assert not user.remove_ticket("T404")


def test_remove_ticket_only_removes_first_duplicate():
    user = _user_with_tickets("T1", "T1")
    assert user.remove_ticket("T1")
    assert len(user.tickets_booked) == 1


def test_find_ticket_and_listing():
    user = _user_with_tickets("T1", "T2")

    assert user.find_ticket("T2").ticket_id == "T2"
    assert user.find_ticket("T9") is None
    lines = user.print_tickets()
    assert len(lines) == 2
    assert "T1" in lines[0]
