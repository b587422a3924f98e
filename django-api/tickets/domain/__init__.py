from tickets.domain.models import NewTicket, PurchasedTicket, Ticket, TicketView
from tickets.domain.value_objects import TicketId

__all__ = ["NewTicket", "PurchasedTicket", "Ticket", "TicketId", "TicketView"]
