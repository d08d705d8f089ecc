"""
Contact notification email.

Sends a plain text + HTML summary of each contact inquiry through an SMTP
relay. Notifications are optional: without a relay host and a recipient
every send is skipped and reported as not sent.
"""
import asyncio
import html
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from functools import partial

from zumba_api.config import Settings
from zumba_api.models import ContactInquiry

logger = logging.getLogger(__name__)

SITE_NAME = "ZumbaWithPooh.com"

# Seconds before a silent relay is given up on
SMTP_TIMEOUT = 10


def _format_submitted_at(inquiry: ContactInquiry) -> str:
    return inquiry.created_at.strftime("%d %b %Y, %I:%M %p UTC")


def build_inquiry_email(inquiry: ContactInquiry) -> tuple[str, str, str]:
    """Subject, plain text body and HTML body for an inquiry notification."""
    subject = f"New Contact Inquiry from {inquiry.name or 'Visitor'}"
    phone = inquiry.phone or "Not provided"
    submitted_at = _format_submitted_at(inquiry)

    text = "\n".join([
        f"You have received a new contact inquiry via {SITE_NAME}",
        "",
        f"Name: {inquiry.name}",
        f"Email: {inquiry.email}",
        f"Phone: {phone}",
        "",
        "Message:",
        inquiry.message,
        "",
        f"Submitted at: {submitted_at}",
    ])

    body = f"""
    <h2>New Contact Inquiry</h2>
    <p><strong>Name:</strong> {html.escape(inquiry.name)}</p>
    <p><strong>Email:</strong> {html.escape(inquiry.email)}</p>
    <p><strong>Phone:</strong> {html.escape(phone)}</p>
    <p><strong>Submitted at:</strong> {submitted_at}</p>
    <hr>
    <p><strong>Message:</strong></p>
    <p style="white-space: pre-line;">{html.escape(inquiry.message)}</p>
    """
    return subject, text, body


class ContactMailer:
    """SMTP relay client for inquiry notifications."""

    def __init__(
        self,
        host: str = "",
        port: int = 587,
        use_ssl: bool = False,
        username: str = "",
        password: str = "",
        ignore_tls_errors: bool = False,
        sender: str = "",
        recipient: str = "",
        timeout: float = SMTP_TIMEOUT,
    ):
        self.host = host
        self.port = port
        self.use_ssl = use_ssl
        self.username = username
        self.password = password
        self.ignore_tls_errors = ignore_tls_errors
        self.sender = sender
        self.recipient = recipient
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContactMailer":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            use_ssl=settings.smtp_use_ssl,
            username=settings.smtp_user,
            password=settings.smtp_pass,
            ignore_tls_errors=settings.smtp_ignore_tls_errors,
            sender=settings.mail_sender,
            recipient=settings.contact_to_email,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.host and self.recipient)

    def _tls_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if self.ignore_tls_errors:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def _connect(self) -> smtplib.SMTP:
        context = self._tls_context()
        if self.use_ssl:
            server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()
        if self.username and self.password:
            server.login(self.username, self.password)
        return server

    def _verify_sync(self):
        with self._connect() as server:
            server.noop()

    def _send_sync(self, message: MIMEMultipart):
        with self._connect() as server:
            server.sendmail(self.sender, [self.recipient], message.as_string())

    async def verify(self) -> bool:
        """Best-effort connectivity check, only logs on failure."""
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._verify_sync)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Email transporter verification failed: {e}")
            return False
        logger.info("Email transporter ready")
        return True

    async def send(self, *, reply_to: str, subject: str, text: str, html_body: str) -> bool:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = self.sender
        message["To"] = self.recipient
        message["Reply-To"] = reply_to
        message.attach(MIMEText(text, "plain", "utf-8"))
        message.attach(MIMEText(html_body, "html", "utf-8"))

        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(self._send_sync, message))
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send contact inquiry email: {e}", exc_info=True)
            return False
        return True

    async def notify_inquiry(self, inquiry: ContactInquiry) -> bool:
        """
        Email the site owner about a new inquiry.

        Returns True only when the relay accepted the message. Disabled or
        failed sends return False and never raise.
        """
        if not (self.enabled and self.sender):
            return False

        subject, text, html_body = build_inquiry_email(inquiry)
        sent = await self.send(reply_to=inquiry.email, subject=subject, text=text, html_body=html_body)
        if sent:
            logger.info(f"Contact inquiry email sent: {inquiry.email} -> {self.recipient}")
        return sent
