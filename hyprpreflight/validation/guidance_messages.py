"""
Centralized guidance templates for hyprpreflight.

This module provides:
- The remediation text attached to every non-passing validation result
- Placeholders filled from the detected values
- A single place to review wording and documentation links

Usage:
    from hyprpreflight.validation.guidance_messages import build_guidance, GUIDANCE_TEMPLATES

    # Build guidance for a known situation
    guidance = build_guidance('DISK_INSUFFICIENT', available_gb=5.2, required_gb=10)

    # Get raw template
    template = GUIDANCE_TEMPLATES['DISK_INSUFFICIENT']
"""

from typing import Any, Dict, List, Optional

from hyprpreflight.config import (
    DEBIAN_UNSTABLE_URL,
    INSTALLATION_DOCS_URL,
    REPOSITORY_DOCS_URL,
    TROUBLESHOOTING_DOCS_URL,
)
from hyprpreflight.validation.guidance import UserGuidance


# Guidance templates with placeholders. Every entry has a message; blocking
# situations also carry at least one step.
GUIDANCE_TEMPLATES: Dict[str, Dict[str, Any]] = {
    # Debian version
    'DEBIAN_DETECTION_FAILED': {
        'message': "Unable to detect Debian version",
        'reason': "Failed to read or parse {os_release_path}",
        'steps': [
            "Ensure {os_release_path} exists and contains VERSION_CODENAME",
            "Verify you are running Debian Sid or Trixie",
            "Check that the system is properly configured",
        ],
        'documentation_url': INSTALLATION_DOCS_URL,
    },

    'DEBIAN_UNSUPPORTED': {
        'message': "Debian {codename} is not supported. Hyprland requires Debian Sid or Trixie.",
        'reason': "This Debian version does not meet Hyprland's requirements",
        'steps': [
            "Upgrade to Debian Sid or Trixie (unstable or testing)",
            "Visit " + DEBIAN_UNSTABLE_URL + " for upgrade instructions",
            "Backup your system before upgrading",
        ],
        'documentation_url': INSTALLATION_DOCS_URL,
    },

    # GPU
    'GPU_NOT_DETECTED': {
        'message': "No GPU detected. Hyprland may run with reduced performance.",
        'reason': "lspci did not detect any VGA or 3D controllers",
        'steps': [
            "Hyprland can run on integrated graphics but performance will be limited",
            "Consider installing a dedicated AMD or NVIDIA GPU for best experience",
            "Check if GPU is properly seated in PCIe slot",
        ],
        'documentation_url': '',
    },

    # Disk space
    'DISK_CHECK_FAILED': {
        'message': "Unable to check disk space",
        'reason': "Failed to query filesystem statistics for {path}",
        'steps': [
            "Verify filesystem is mounted correctly",
            "Check disk health with 'smartctl -a /dev/sda'",
            "Ensure at least {required_gb} GB of free space on {path}",
        ],
        'documentation_url': TROUBLESHOOTING_DOCS_URL,
    },

    'DISK_INSUFFICIENT': {
        'message': "Insufficient disk space. Found {available_gb:.2f} GB, need {required_gb:.2f} GB",
        'reason': "Hyprland and dependencies require significant disk space",
        'steps': [
            "Free up disk space by removing unnecessary files",
            "Use 'apt clean' to remove cached packages",
            "Use 'du -sh /*' to find large directories",
            "Consider resizing partitions or adding storage",
        ],
        'documentation_url': INSTALLATION_DOCS_URL,
    },

    # Internet connectivity
    'INTERNET_CHECK_FAILED': {
        'message': "Unable to test internet connectivity",
        'reason': "Network connectivity test failed",
        'steps': [
            "Check network configuration with 'ip addr' and 'ip route'",
            "Verify DNS resolution with 'ping -c 3 debian.org'",
            "Check firewall settings",
            "Ensure network cable is connected or WiFi is enabled",
        ],
        'documentation_url': TROUBLESHOOTING_DOCS_URL,
    },

    'INTERNET_UNREACHABLE': {
        'message': "No internet connection detected. Cannot reach Debian repositories.",
        'reason': "All connectivity tests failed to reach Debian servers",
        'steps': [
            "Check network cable or WiFi connection",
            "Verify network configuration: 'ip addr' and 'ip route'",
            "Test DNS: 'ping -c 3 debian.org'",
            "Check if proxy settings are required",
            "Temporarily disable firewall: 'systemctl stop ufw'",
        ],
        'documentation_url': TROUBLESHOOTING_DOCS_URL,
    },

    # Source repositories
    'SOURCES_CHECK_FAILED': {
        'message': "Unable to check source repositories",
        'reason': "Could not read {sources_list_path} or {sources_list_dir}/",
        'steps': [
            "This is optional but recommended for building packages from source",
            "Manually verify {sources_list_path} contains deb-src lines",
        ],
        'documentation_url': REPOSITORY_DOCS_URL,
    },

    'SOURCES_NOT_CONFIGURED': {
        'message': "Source repositories (deb-src) are not configured. Recommended for building packages.",
        'reason': "No deb-src lines found in apt configuration",
        'steps': [
            "Edit {sources_list_path}",
            "Uncomment lines starting with 'deb-src' or add them if missing",
            "Run 'apt update' after making changes",
            "This is optional but helpful for building custom packages",
        ],
        'documentation_url': REPOSITORY_DOCS_URL,
    },

    # Run-level situations
    'CHECK_INTERRUPTED': {
        'message': "{check} check did not complete",
        'reason': "The check was stopped before it finished ({why})",
        'steps': [
            "Re-run the preflight checks",
            "Increase the overall timeout with --timeout <seconds>",
        ],
        'documentation_url': TROUBLESHOOTING_DOCS_URL,
    },

    'CHECK_CRASHED': {
        'message': "{check} check failed unexpectedly",
        'reason': "{error}",
        'steps': [
            "Re-run with --debug to see the full error",
            "Report the problem together with the debug output",
        ],
        'documentation_url': TROUBLESHOOTING_DOCS_URL,
    },
}


def _render(text: str, kwargs: Dict[str, Any]) -> str:
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        # Leave the template as-is when a placeholder cannot be filled
        return text


def build_guidance(guidance_key: str, reason: Optional[str] = None, **kwargs) -> UserGuidance:
    """
    Build UserGuidance from a template.

    Args:
        guidance_key: Key for the guidance template.
        reason: Replaces the template's reason when given.
        **kwargs: Parameters to substitute in the template.

    Returns:
        The rendered UserGuidance.

    Example:
        >>> build_guidance('DEBIAN_UNSUPPORTED', codename='bookworm').message
        'Debian bookworm is not supported. Hyprland requires Debian Sid or Trixie.'
    """
    template = GUIDANCE_TEMPLATES.get(guidance_key)
    if template is None:
        return UserGuidance.create(
            message=f"Unknown guidance: {guidance_key}",
            steps=[f"See {TROUBLESHOOTING_DOCS_URL}"],
        )

    return UserGuidance.create(
        message=_render(template['message'], kwargs),
        reason=reason if reason is not None else _render(template.get('reason', ''), kwargs),
        steps=[_render(step, kwargs) for step in template.get('steps', [])],
        documentation_url=template.get('documentation_url', ''),
    )


def get_guidance_template(guidance_key: str) -> Optional[Dict[str, Any]]:
    """Get the raw template for a guidance key, or None."""
    return GUIDANCE_TEMPLATES.get(guidance_key)


def list_guidance_keys() -> List[str]:
    """List all available guidance keys."""
    return list(GUIDANCE_TEMPLATES.keys())
