import structlog

logger = structlog.get_logger()


class NotificationService:
    """Simulated e-mail notifications.

    Nothing leaves the process: every message is written to the log and kept
    in ``sent`` so callers can inspect what would have been delivered.
    """

    def __init__(self) -> None:
        self.sent: list[dict] = []

    async def send(self, to: str, subject: str, body: str) -> None:
        message = {"to": to, "subject": subject, "body": body}
        self.sent.append(message)
        logger.info("notification_sent", to=to, subject=subject)

    async def send_registration_confirmation(
        self, email: str, wedding_title: str, guests: int
    ) -> None:
        await self.send(
            to=email,
            subject=f"You're registered for {wedding_title}",
            body=(
                f"Your registration for {wedding_title} is confirmed "
                f"for {guests} {'guest' if guests == 1 else 'guests'}."
            ),
        )

    async def send_cancellation_notice(self, email: str, wedding_title: str) -> None:
        await self.send(
            to=email,
            subject=f"Registration canceled: {wedding_title}",
            body=f"Your registration for {wedding_title} has been canceled.",
        )
