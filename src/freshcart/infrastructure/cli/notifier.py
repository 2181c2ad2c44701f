"""Notifier that prints cart notifications to the terminal."""

from __future__ import annotations

import click

from freshcart.application.notifications import DESTRUCTIVE, Notification, Notifier


class ClickNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        destructive = notification.variant == DESTRUCTIVE
        text = notification.title
        if notification.description:
            text = f"{text}: {notification.description}"
        click.secho(text, fg="red" if destructive else "green", err=destructive)
