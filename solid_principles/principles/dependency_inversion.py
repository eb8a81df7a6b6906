# solid_principles/principles/dependency_inversion.py
"""
Dependency Inversion Principle.

High-level modules should not depend on low-level modules; both should
depend on abstractions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from solid_principles.core import Illustration, PrincipleExample, Transcript

# =============================================================================
# Violating
# =============================================================================


class SmtpEmailSender:
    def send_email(self, recipient: str, message: str) -> str:
        return f"Email to {recipient}: {message}"


class Notification:
    """Builds its own SmtpEmailSender, so it can only ever send email."""

    def __init__(self):
        self.sender = SmtpEmailSender()

    def send(self, recipient: str, message: str) -> str:
        return self.sender.send_email(recipient, message)


def run_violation(out: Transcript) -> None:
    notification = Notification()
    out.write(notification.send("alice@example.com", "Your order has shipped"))


# =============================================================================
# Adhering
# =============================================================================


class MessageSender(ABC):
    @abstractmethod
    def send(self, recipient: str, message: str) -> str:
        raise NotImplementedError


class EmailSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"Email to {recipient}: {message}"


class SMSSender(MessageSender):
    def send(self, recipient: str, message: str) -> str:
        return f"SMS to {recipient}: {message}"


class NotificationService:
    """Depends only on MessageSender; the concrete sender is injected."""

    def __init__(self, sender: MessageSender):
        self.sender = sender

    def notify(self, recipient: str, message: str) -> str:
        return self.sender.send(recipient, message)


def run_adherence(out: Transcript) -> None:
    email = NotificationService(EmailSender())
    sms = NotificationService(SMSSender())
    out.write(email.notify("alice@example.com", "Your order has shipped"))
    out.write(sms.notify("+1-555-0100", "Your order has shipped"))


EXAMPLE = PrincipleExample(
    key="dependency_inversion",
    letter="D",
    title="Dependency Inversion Principle",
    summary=(
        "Depend on abstractions, not concretions. High-level policy receives the "
        "low-level detail it needs instead of constructing it."
    ),
    violation=Illustration(
        description="Notification is welded to SmtpEmailSender; switching to SMS means rewriting it.",
        members=(SmtpEmailSender, Notification),
        driver=run_violation,
    ),
    adherence=Illustration(
        description="NotificationService takes any MessageSender, so senders swap at composition time.",
        members=(MessageSender, EmailSender, SMSSender, NotificationService),
        driver=run_adherence,
    ),
    aliases=("dip", "dependency-inversion"),
)
