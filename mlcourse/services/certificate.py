"""Course completion certificate: an SVG with the learner's name overlaid."""
from datetime import date

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mlcourse.core.config import BASE_DIR
from mlcourse.services.progress import is_certificate_eligible

# Canvas size matches the landscape certificate artwork
CERTIFICATE_WIDTH = 800
CERTIFICATE_HEIGHT = 550
CERTIFICATE_FILENAME = "certificate.svg"

_env = Environment(
    loader=FileSystemLoader(BASE_DIR / "templates"),
    autoescape=select_autoescape(["svg", "html"]),
)


class CertificateNotEarnedError(Exception):
    pass


def render_certificate(name: str, total: int, issued_on: date | None = None) -> str:
    """Render the certificate; only a learner at 100% progress gets one."""
    if not is_certificate_eligible(total):
        raise CertificateNotEarnedError(f"progress is {total}%, certificate needs 100%")
    return _env.get_template("certificate.svg").render(
        name=name,
        issued_on=(issued_on or date.today()).isoformat(),
        width=CERTIFICATE_WIDTH,
        height=CERTIFICATE_HEIGHT,
    )
