from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from config import Env
from errors import EmailDeliveryError
import logging
import smtplib

logger = logging.getLogger(__name__)

SMTP_SERVER = "smtp.gmail.com"
SMTP_PORT = 587


def welcome_email_body(name: str, client_url: str) -> str:
    return f"""
    <html>
    <body>
        <h1>Welcome to BradChat!</h1>
        <p>Hello {name},</p>
        <p>Your account is ready. Jump in and start chatting with people around the world.</p>
        <p><a href="{client_url}">Open BradChat</a></p>
        <p>Best regards,<br>The BradChat Team</p>
    </body>
    </html>
    """


def send_welcome_email(email: str, name: str, client_url: str, env: Env):
    msg = MIMEMultipart()
    msg["Subject"] = "Welcome to BradChat!"
    msg["From"] = f"{env.EMAIL_FROM_NAME} <{env.EMAIL_USER}>"
    msg["To"] = email
    msg.attach(MIMEText(welcome_email_body(name, client_url), "html"))

    try:
        with smtplib.SMTP(SMTP_SERVER, SMTP_PORT) as server:
            server.starttls()
            server.login(env.EMAIL_USER, env.EMAIL_PASS)
            server.send_message(msg, env.EMAIL_USER, email)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("Error sending welcome email to %s: %s", email, e)
        raise EmailDeliveryError("Failed to send welcome email") from e
    logger.info("Welcome email sent successfully to %s", email)


def welcome_new_user(email: str, name: str, env: Env):
    """Background task run after signup; delivery problems never reach the client."""
    if not env.EMAIL_USER:
        logger.debug("EMAIL_USER not configured, skipping welcome email")
        return
    try:
        send_welcome_email(email, name, env.CLIENT_URL or "", env)
    except EmailDeliveryError:
        logger.warning("Welcome email to %s was not delivered", email)
