# solid_principles/principles/single_responsibility.py
"""
Single Responsibility Principle.

A class should have one, and only one, reason to change.
"""

from __future__ import annotations

from dataclasses import dataclass

from solid_principles.core import Illustration, PrincipleExample, Transcript

# =============================================================================
# Violating
# =============================================================================


class UserManager:
    """Holds user data, persists it, formats it and emails it."""

    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def save(self, out: Transcript) -> None:
        out.write(f"Saving user {self.name} to the database")

    def generate_report(self) -> str:
        return f"User report: {self.name}, {self.age} years old"

    def send_email(self, out: Transcript, message: str) -> None:
        out.write(f"Sending email to {self.name}: {message}")


def run_violation(out: Transcript) -> None:
    manager = UserManager("Alice", 30)
    manager.save(out)
    out.write(manager.generate_report())
    manager.send_email(out, "Welcome aboard!")


# =============================================================================
# Adhering
# =============================================================================


@dataclass
class User:
    name: str
    age: int


class UserRepository:
    """Persistence only."""

    def save(self, user: User, out: Transcript) -> None:
        out.write(f"Saving user {user.name} to the database")


class UserReportFormatter:
    """Presentation only."""

    def format(self, user: User) -> str:
        return f"User report: {user.name}, {user.age} years old"


class EmailService:
    """Delivery only."""

    def send(self, user: User, message: str, out: Transcript) -> None:
        out.write(f"Sending email to {user.name}: {message}")


def run_adherence(out: Transcript) -> None:
    user = User("Alice", 30)
    UserRepository().save(user, out)
    out.write(UserReportFormatter().format(user))
    EmailService().send(user, "Welcome aboard!", out)


EXAMPLE = PrincipleExample(
    key="single_responsibility",
    letter="S",
    title="Single Responsibility Principle",
    summary=(
        "A class should have only one reason to change. Storing, reporting and "
        "notifying are separate concerns, so they belong in separate classes."
    ),
    violation=Illustration(
        description="UserManager changes whenever storage, report layout or email delivery changes.",
        members=(UserManager,),
        driver=run_violation,
    ),
    adherence=Illustration(
        description="The user record is plain data; each concern lives in its own class.",
        members=(User, UserRepository, UserReportFormatter, EmailService),
        driver=run_adherence,
    ),
    aliases=("srp", "single-responsibility"),
)
