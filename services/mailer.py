import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from flask import current_app


def send_task_email(recipient_email: str, recipient_name: str, subject: str, html_body: str) -> bool:
    """Envía un correo HTML. Nunca lanza: los fallos solo quedan en el log."""
    cfg = current_app.config
    server = cfg.get("MAIL_SERVER")
    sender = cfg.get("MAIL_DEFAULT_SENDER")
    if not server or not sender:
        current_app.logger.warning("Configuración de correo incompleta; no se envía a %s", recipient_email)
        return False

    msg = MIMEMultipart()
    msg["Subject"] = subject
    msg["From"] = sender
    msg["To"] = formataddr((recipient_name or "", recipient_email))
    msg.attach(MIMEText(html_body, "html", "utf-8"))

    try:
        with smtplib.SMTP(server, cfg.get("MAIL_PORT", 587), timeout=cfg.get("MAIL_TIMEOUT", 20)) as s:
            if cfg.get("MAIL_USE_TLS", True):
                s.starttls()
            if cfg.get("MAIL_USERNAME") and cfg.get("MAIL_PASSWORD"):
                s.login(cfg["MAIL_USERNAME"], cfg["MAIL_PASSWORD"])
            s.sendmail(sender, [recipient_email], msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error("No se pudo enviar correo a %s: %s", recipient_email, e)
        return False

    return True
