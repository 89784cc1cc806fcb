"""
Notifications Module - Email and Telegram notifications
"""

import smtplib
from datetime import datetime
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import parseaddr
import requests
from flask import current_app, render_template


TELEGRAM_API_URL = 'https://api.telegram.org/bot{token}/sendMessage'


def get_mail_config():
    """Load SMTP settings from the app config"""
    return {
        'host': current_app.config.get('SMTP_HOST', ''),
        'port': current_app.config.get('SMTP_PORT', '587'),
        'user': current_app.config.get('SMTP_USER', ''),
        'password': current_app.config.get('SMTP_PASSWORD', ''),
        'from': current_app.config.get('EMAIL_FROM', '')
    }


def get_telegram_credentials():
    """
    Get admin Telegram credentials

    Returns:
        tuple: (bot_token, chat_id) or (None, None) if not configured
    """
    bot_token = current_app.config.get('ADMIN_TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('ADMIN_TELEGRAM_CHAT_ID')
    if bot_token and chat_id:
        return bot_token, chat_id
    return None, None


def send_email(recipient, subject, html_body, text_body=None, cc=None):
    """
    Send email using SMTP

    Args:
        recipient (str): Email recipient
        subject (str): Email subject
        html_body (str): HTML content
        text_body (str, optional): Plain text alternative
        cc (str, optional): CC address

    Returns:
        bool: False when SMTP is not configured, True once sent

    Raises:
        smtplib.SMTPException, OSError: When the transport fails
    """
    smtp_config = get_mail_config()
    if not all([recipient, smtp_config['host'], smtp_config['user'], smtp_config['password']]):
        current_app.logger.debug(f"SMTP config incomplete, skipping email '{subject}'")
        return False

    msg = MIMEMultipart('alternative')
    msg['Subject'] = subject
    msg['From'] = smtp_config['from'] or smtp_config['user']
    msg['To'] = recipient
    if cc:
        msg['Cc'] = cc

    if text_body:
        msg.attach(MIMEText(text_body, 'plain'))
    msg.attach(MIMEText(html_body, 'html'))

    try:
        with smtplib.SMTP(smtp_config['host'], int(smtp_config['port']), timeout=30) as server:
            server.starttls()
            server.login(smtp_config['user'], smtp_config['password'])
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Failed to send email '{subject}' to {recipient}: {str(e)}")
        raise

    current_app.logger.info(f"📧 Email sent successfully to {parseaddr(recipient)[1] or recipient}")
    return True


def send_telegram_alert(subject, message_text):
    """
    Post an admin alert to Telegram

    Returns:
        bool: True if Telegram accepted the message
    """
    bot_token, chat_id = get_telegram_credentials()
    if not (bot_token and chat_id):
        current_app.logger.debug("Admin Telegram credentials not configured")
        return False

    payload = {
        'chat_id': chat_id,
        'text': f"🔔 <b>{subject}</b>\n\n{message_text}",
        'parse_mode': 'HTML'
    }
    response = requests.post(TELEGRAM_API_URL.format(token=bot_token), json=payload, timeout=10)
    if response.status_code != 200:
        current_app.logger.error(f"Telegram API error: {response.status_code}")
        return False

    current_app.logger.info("Admin Telegram notification sent")
    return True


def render_enquiry_email(enquiry):
    """Render the HTML body announcing a new enquiry"""
    return render_template(
        'emails/enquiry.html',
        enquiry=enquiry,
        formatted_date=datetime.utcnow().strftime('%B %d, %Y %H:%M UTC')
    )


def render_error_email(error_info, request_info):
    """Render the HTML body reporting a server error"""
    return render_template(
        'emails/error.html',
        error=error_info,
        request_info=request_info,
        formatted_date=datetime.utcnow().strftime('%B %d, %Y %H:%M:%S UTC')
    )


def send_enquiry_notification(enquiry):
    """
    Notify the site owner about a new enquiry

    Args:
        enquiry (dict): Stored enquiry as produced by Enquiry.to_dict()
    """
    subject = f"New Enquiry from {enquiry['name']} - Portfolio"

    contact = enquiry.get('email') or enquiry.get('phone')
    requirement = enquiry.get('requirement') or ''
    try:
        send_telegram_alert(
            'New Portfolio Enquiry',
            f"👤 From: {enquiry['name']}\n📞 Contact: {contact}\n"
            f"💬 {requirement[:200]}{'...' if len(requirement) > 200 else ''}"
        )
    except requests.RequestException as e:
        current_app.logger.error(f"Admin Telegram Error: {str(e)}")

    return send_email(
        recipient=current_app.config.get('ENQUIRY_EMAIL_TO'),
        subject=subject,
        html_body=render_enquiry_email(enquiry)
    )


def send_error_notification(error_info, request_info):
    """
    Email an error report to the maintainer

    Args:
        error_info (dict): {type, message, stack}
        request_info (dict): {url, method, ip, user_agent}
    """
    subject = f"Error Encountered In Portfolio - {datetime.utcnow().strftime('%d/%m/%Y')}"
    return send_email(
        recipient=current_app.config.get('ERROR_EMAIL_TO'),
        subject=subject,
        html_body=render_error_email(error_info, request_info)
    )


def get_notifier():
    """Notifier callable registered on the current app"""
    return current_app.extensions.get('enquiry_notifier', send_enquiry_notification)
