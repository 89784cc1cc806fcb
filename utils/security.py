"""
Security Module - Security headers and client identification
"""

from flask import request


# Content Security Policy allow-list for the portfolio front-end
CSP_DIRECTIVES = {
    'default-src': ["'self'"],
    'style-src': ["'self'", "'unsafe-inline'", 'https://cdnjs.cloudflare.com'],
    'script-src': ["'self'"],
    'img-src': ["'self'", 'data:', 'https:'],
    'font-src': ["'self'", 'https://cdnjs.cloudflare.com'],
    'object-src': ["'none'"],
    'base-uri': ["'self'"],
    'form-action': ["'self'"],
    'frame-ancestors': ["'self'"],
}

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'X-DNS-Prefetch-Control': 'off',
    'X-XSS-Protection': '0',
    'Referrer-Policy': 'no-referrer',
    'Strict-Transport-Security': 'max-age=31536000; includeSubDomains',
    'Cross-Origin-Opener-Policy': 'same-origin',
    'Cross-Origin-Resource-Policy': 'same-origin',
}


def build_content_security_policy(directives=None):
    """Render CSP directives into a header value"""
    directives = directives or CSP_DIRECTIVES
    return '; '.join(f"{name} {' '.join(sources)}" for name, sources in directives.items())


def apply_security_headers(response):
    """Add security headers to a response"""
    response.headers['Content-Security-Policy'] = build_content_security_policy()
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.headers.get('X-Forwarded-For', '')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.remote_addr or 'unknown'


def get_user_agent():
    return request.headers.get('User-Agent', 'Unknown')[:255]


__all__ = [
    'CSP_DIRECTIVES',
    'SECURITY_HEADERS',
    'build_content_security_policy',
    'apply_security_headers',
    'get_client_ip',
    'get_user_agent',
]
