import logging

from models import FileFinding, RepoScanResult, ScanResult
from tools import files

log = logging.getLogger(__name__)


def scan(text: str, forbidden: list[str]) -> ScanResult:
    """report every forbidden token found as a literal substring of text

    Each entry of ``forbidden`` is checked on its own, so duplicates that are
    found show up once per entry and ``matches`` keeps the list's order. The
    match is exact and case-sensitive. An empty token is contained in every
    string and therefore always matches.
    """
    matches = [token for token in forbidden if token in text]
    return ScanResult(is_safe=not matches, matches=matches)


def scan_code(code: str, forbidden: list[str]) -> tuple[bool, list[str]]:
    """scan code and return the (is_safe, matches) pair"""
    return scan(code, forbidden).as_pair()


def scan_repo(root: str, forbidden: list[str]) -> RepoScanResult:
    """scan every text file below root"""
    findings = []
    scanned = 0
    for path in files.walk(root):
        try:
            content = files.read(path, root)
        except UnicodeDecodeError:
            log.info("skipping non-utf-8 file %s", path)
            continue
        except (ValueError, OSError) as e:
            # symlinks out of root, unreadable or vanished files
            log.info("skipping %s: %s", path, e)
            continue

        scanned += 1
        result = scan(content, forbidden)
        if not result.is_safe:
            findings.append(FileFinding(path=path, matches=result.matches))

    return RepoScanResult(is_safe=not findings, files_scanned=scanned, findings=findings)
