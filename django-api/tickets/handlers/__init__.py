from tickets.handlers.views import MyTicketListView, PurchaseView, TicketDetailView, TicketValidateView

__all__ = ["MyTicketListView", "PurchaseView", "TicketDetailView", "TicketValidateView"]
