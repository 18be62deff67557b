import logging
from typing import Optional

from config import settings
from models import Policy, RepoScanResult, ScanInput, ScanRequest, ScanResult
from tools import files, security

log = logging.getLogger(__name__)


# in-memory store passed from app
_policies: dict[str, Policy] = {}


class PolicyNotFoundError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"policy not found: {self.name}"


def init_stores(policies: dict[str, Policy]):
    """initialize reference to the app's policy store"""
    global _policies
    _policies = policies


def register_policy(policy: Policy) -> Policy:
    """insert or replace a policy by name"""
    replaced = policy.name in _policies
    _policies[policy.name] = policy
    log.info(
        "%s policy %s (%d patterns)",
        "replaced" if replaced else "registered",
        policy.name,
        len(policy.block_patterns),
    )
    return policy


def get_policy(name: str) -> Policy:
    if name not in _policies:
        raise PolicyNotFoundError(name)
    return _policies[name]


def list_policies() -> list[Policy]:
    return [_policies[name] for name in sorted(_policies)]


def resolve_patterns(forbidden: Optional[list[str]] = None, policy_name: Optional[str] = None) -> list[str]:
    """explicit list first, then the named policy, then the default policy"""
    if forbidden is not None:
        return list(forbidden)
    return list(get_policy(policy_name or settings.default_policy).block_patterns)


def _report(subject: str, result: ScanResult) -> ScanResult:
    if result.is_safe:
        log.debug("%s: safe", subject)
    else:
        log.warning("%s: forbidden tokens found: %s", subject, result.matches)
    return result


def to_input(request: ScanRequest) -> ScanInput:
    return ScanInput(text=request.text, forbidden=resolve_patterns(request.forbidden, request.policy))


def check(request: ScanRequest) -> ScanResult:
    """scan submitted text against the resolved forbidden list"""
    item = to_input(request)
    return _report("submission", security.scan(item.text, item.forbidden))


def check_batch(requests: list[ScanRequest]) -> list[ScanResult]:
    """scan several submissions; results keep request order"""
    # resolve everything first so an unknown policy fails the whole batch
    items = [to_input(r) for r in requests]
    return [_report(f"submission {i}", security.scan(item.text, item.forbidden)) for i, item in enumerate(items)]


def check_file(path: str, forbidden: Optional[list[str]] = None, policy_name: Optional[str] = None) -> ScanResult:
    """scan one stored file below the source root"""
    patterns = resolve_patterns(forbidden, policy_name)
    content = files.read(path, settings.source_root)
    return _report(path, security.scan(content, patterns))


def check_repo(path: str = ".", forbidden: Optional[list[str]] = None, policy_name: Optional[str] = None) -> RepoScanResult:
    """scan every stored file below a directory of the source root"""
    patterns = resolve_patterns(forbidden, policy_name)
    root = files.resolve(path, settings.source_root)
    if not root.is_dir():
        raise FileNotFoundError(f"directory not found: {path}")

    result = security.scan_repo(str(root), patterns)
    if result.is_safe:
        log.debug("%s: %d files safe", path, result.files_scanned)
    else:
        log.warning(
            "%s: forbidden tokens in %d of %d files",
            path,
            len(result.findings),
            result.files_scanned,
        )
    return result
