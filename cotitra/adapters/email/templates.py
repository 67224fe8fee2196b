"""Notification email templates: implements EmailTemplateRenderer."""

from __future__ import annotations

from html import escape

from cotitra.application.ports.template_port import EmailTemplate, EmailTemplateRenderer
from cotitra.config import settings
from cotitra.domain.entities.comment import Comment
from cotitra.domain.entities.ticket import Ticket
from cotitra.domain.entities.user import User
from cotitra.domain.value_objects.enums import TicketStatus


def _status(status: TicketStatus | str) -> str:
    return status.value if isinstance(status, TicketStatus) else str(status)


class EmailTemplates(EmailTemplateRenderer):
    """French notification copy with escaped HTML and a plain-text twin."""

    def __init__(self, app_name: str | None = None, app_url: str | None = None):
        self._app_name = app_name or settings.app_name
        self._app_url = (app_url or settings.app_url).rstrip("/")

    def ticket_url(self, ticket: Ticket) -> str:
        return f"{self._app_url}/tickets/{ticket.id}"

    def _subject(self, prefix: str, ticket: Ticket) -> str:
        return f"[{self._app_name}] {prefix} : {ticket.title}"

    def ticket_created(self, ticket: Ticket) -> EmailTemplate:
        url = self.ticket_url(ticket)
        html_body = (
            "<h2>Nouveau ticket créé</h2>\n"
            f"<p><strong>Titre :</strong> {escape(ticket.title)}</p>\n"
            "<p><strong>Description :</strong></p>\n"
            f"<p>{escape(ticket.description)}</p>\n"
            f"<p><strong>Statut :</strong> {_status(ticket.status)}</p>\n"
            f'<p><a href="{escape(url)}">Voir le ticket</a></p>\n'
        )
        text_body = (
            "Nouveau ticket créé\n\n"
            f"Titre : {ticket.title}\n"
            f"Description : {ticket.description}\n"
            f"Statut : {_status(ticket.status)}\n\n"
            f"Voir le ticket : {url}\n"
        )
        return EmailTemplate(
            subject=self._subject("Nouveau ticket créé", ticket),
            html_body=html_body,
            text_body=text_body,
        )

    def ticket_assigned(self, ticket: Ticket, assignee: User) -> EmailTemplate:
        url = self.ticket_url(ticket)
        html_body = (
            "<h2>Un ticket vous a été assigné</h2>\n"
            f"<p>Bonjour {escape(assignee.first_name)},</p>\n"
            "<p>Le ticket suivant vous a été assigné :</p>\n"
            f"<p><strong>Titre :</strong> {escape(ticket.title)}</p>\n"
            "<p><strong>Description :</strong></p>\n"
            f"<p>{escape(ticket.description)}</p>\n"
            f'<p><a href="{escape(url)}">Voir le ticket</a></p>\n'
        )
        text_body = (
            "Un ticket vous a été assigné\n\n"
            f"Bonjour {assignee.first_name},\n\n"
            "Le ticket suivant vous a été assigné :\n\n"
            f"Titre : {ticket.title}\n"
            f"Description : {ticket.description}\n\n"
            f"Voir le ticket : {url}\n"
        )
        return EmailTemplate(
            subject=self._subject("Ticket assigné", ticket),
            html_body=html_body,
            text_body=text_body,
        )

    def ticket_status_changed(
        self, ticket: Ticket, old_status: TicketStatus, new_status: TicketStatus
    ) -> EmailTemplate:
        url = self.ticket_url(ticket)
        html_body = (
            "<h2>Changement de statut du ticket</h2>\n"
            f"<p><strong>Titre :</strong> {escape(ticket.title)}</p>\n"
            f"<p><strong>Ancien statut :</strong> {_status(old_status)}</p>\n"
            f"<p><strong>Nouveau statut :</strong> {_status(new_status)}</p>\n"
            f'<p><a href="{escape(url)}">Voir le ticket</a></p>\n'
        )
        text_body = (
            "Changement de statut du ticket\n\n"
            f"Titre : {ticket.title}\n"
            f"Ancien statut : {_status(old_status)}\n"
            f"Nouveau statut : {_status(new_status)}\n\n"
            f"Voir le ticket : {url}\n"
        )
        return EmailTemplate(
            subject=self._subject("Changement de statut", ticket),
            html_body=html_body,
            text_body=text_body,
        )

    def comment_added(self, ticket: Ticket, comment: Comment) -> EmailTemplate:
        url = self.ticket_url(ticket)
        author = comment.author.full_name
        html_body = (
            "<h2>Nouveau commentaire sur le ticket</h2>\n"
            f"<p><strong>Ticket :</strong> {escape(ticket.title)}</p>\n"
            f"<p><strong>Auteur :</strong> {escape(author)}</p>\n"
            "<p><strong>Commentaire :</strong></p>\n"
            f"<p>{escape(comment.content)}</p>\n"
            f'<p><a href="{escape(url)}">Voir le ticket</a></p>\n'
        )
        text_body = (
            "Nouveau commentaire sur le ticket\n\n"
            f"Ticket : {ticket.title}\n"
            f"Auteur : {author}\n"
            f"Commentaire : {comment.content}\n\n"
            f"Voir le ticket : {url}\n"
        )
        return EmailTemplate(
            subject=self._subject("Nouveau commentaire", ticket),
            html_body=html_body,
            text_body=text_body,
        )
