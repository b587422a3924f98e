from django.urls import path

from tickets.handlers import MyTicketListView, PurchaseView, TicketDetailView, TicketValidateView

urlpatterns = [
    path("purchase/<str:event_id>", PurchaseView.as_view(), name="ticket-purchase"),
    path("mine", MyTicketListView.as_view(), name="ticket-mine"),
    path("validate/<str:code>", TicketValidateView.as_view(), name="ticket-validate"),
    path("<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
]
