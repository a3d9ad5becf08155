#!/usr/bin/env python3
"""String classification helpers."""

from __future__ import annotations

import ipaddress
import re

API_PATTERNS = [
    "CreateFile",
    "WriteFile",
    "ReadFile",
    "RegOpenKey",
    "RegSetValue",
    "GetProcAddress",
    "LoadLibrary",
    "VirtualAlloc",
    "VirtualProtect",
    "CreateThread",
    "CreateProcess",
    "OpenProcess",
    "ShellExecute",
    "WinExec",
    "InternetOpen",
    "URLDownloadToFile",
]

REGISTRY_HIVES = ("HKEY_", "HKLM", "HKCU", "HKCR", "HKCC", "HKU")
REGISTRY_MARKERS = ("\\SOFTWARE\\", "SYSTEM\\CURRENTCONTROLSET", "\\REGISTRY\\MACHINE", "\\REGISTRY\\USER")

KNOWN_MODULES = {
    "kernel32",
    "kernelbase",
    "user32",
    "gdi32",
    "ntdll",
    "advapi32",
    "shell32",
    "ws2_32",
    "wininet",
    "winhttp",
    "urlmon",
    "crypt32",
    "msvcrt",
    "ucrtbase",
    "libc",
    "libdl",
    "libpthread",
    "libssl",
    "libcrypto",
}

SHELL_BINARIES = {
    "sh",
    "bash",
    "dash",
    "zsh",
    "ksh",
    "busybox",
    "ls",
    "cat",
    "rm",
    "cp",
    "mv",
    "chmod",
    "chown",
    "wget",
    "curl",
    "nc",
    "netcat",
    "kill",
    "killall",
    "ps",
    "uname",
    "crontab",
    "python",
    "python3",
    "perl",
    "ruby",
    "whoami",
    "cmd",
    "cmd.exe",
    "powershell",
    "powershell.exe",
    "pwsh",
    "rundll32.exe",
    "regsvr32.exe",
    "mshta.exe",
    "wscript.exe",
    "cscript.exe",
    "certutil.exe",
    "schtasks.exe",
    "net.exe",
    "sc.exe",
    "reg.exe",
}

IPV4_RE = re.compile(r"\b(?:(?:25[0-5]|2[0-4]\d|1?\d?\d)\.){3}(?:25[0-5]|2[0-4]\d|1?\d?\d)\b")
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
DRIVE_PATH_RE = re.compile(r"^[A-Za-z]:[\\/]")
RELATIVE_PATH_RE = re.compile(r"[\w.\-~$%@+\\/]+")
LIBRARY_SUFFIX_RE = re.compile(r"(?i)\.(?:dll|sys|ocx|drv|cpl|dylib|so(?:\.\d+)*)$")
PASCAL_CASE_RE = re.compile(r"[A-Z][a-z0-9]+(?:[A-Z][a-z0-9]*)+")
NATIVE_API_RE = re.compile(r"(?:Nt|Zw|Rtl|Ldr)[A-Z]\w+")
INVOCATION_RE = re.compile(
    r"(?i)\b(?:cmd(?:\.exe)?\s+/[ck]|powershell(?:\.exe)?\s+-\w+|(?:ba)?sh\s+-c|python[23]?\s+-c)\b"
)


def is_url_string(value: str) -> bool:
    return "://" in value


def is_ip_string(value: str) -> bool:
    if IPV4_RE.search(value):
        return True
    candidate = value.strip().strip("[]")
    if candidate.count(":") < 2:
        return False
    try:
        ipaddress.IPv6Address(candidate.split("%", 1)[0])
    except ValueError:
        return False
    return True


def is_email_string(value: str) -> bool:
    return EMAIL_RE.search(value) is not None


def is_registry_string(value: str) -> bool:
    upper = value.strip().upper()
    if upper.startswith("HKEY_"):
        return True
    for hive in REGISTRY_HIVES[1:]:
        if upper.startswith(hive) and (len(upper) == len(hive) or upper[len(hive)] in "\\/:"):
            return True
    return upper.startswith("SOFTWARE\\") or any(marker in upper for marker in REGISTRY_MARKERS)


def classify_path_kind(value: str) -> str | None:
    """Return 'unc', 'absolute' or 'relative' for path-shaped strings"""
    text = value.strip()
    if len(text) < 2 or is_url_string(text) or is_registry_string(text):
        return None
    if text.startswith("\\\\"):
        return "unc"
    if DRIVE_PATH_RE.match(text) or (text.startswith("/") and any(c.isalnum() for c in text)):
        return "absolute"
    if text.startswith(("~/", "./", "../", ".\\", "..\\")):
        return "relative"
    if (
        ("/" in text or "\\" in text)
        and len(text) > 3
        and RELATIVE_PATH_RE.fullmatch(text)
        and any(c.isalpha() for c in text)
    ):
        return "relative"
    return None


def is_path_string(value: str) -> bool:
    return classify_path_kind(value) is not None


def is_library_string(value: str) -> bool:
    text = value.strip()
    if LIBRARY_SUFFIX_RE.search(text):
        return True
    return text.lower() in KNOWN_MODULES


def is_api_string(value: str) -> bool:
    return any(re.search(rf"\b{pattern}", value) for pattern in API_PATTERNS)


def is_api_shape(value: str) -> bool:
    text = value.strip()
    return bool(PASCAL_CASE_RE.fullmatch(text) or NATIVE_API_RE.fullmatch(text))


def command_binary(value: str) -> str | None:
    """Basename of the invoked program when the value looks like a command line"""
    parts = value.strip().split()
    if not parts:
        return None
    token = parts[0].strip("\"'")
    basename = re.split(r"[\\/]", token)[-1].lower()
    if basename not in SHELL_BINARIES:
        return None
    if "/" in token or "\\" in token or len(parts) > 1 or basename.endswith(".exe"):
        return basename
    return None


def is_command_string(value: str) -> bool:
    return command_binary(value) is not None or INVOCATION_RE.search(value) is not None


def classify_command_type(value: str) -> str:
    lower = value.lower()
    if "powershell" in lower or "pwsh" in lower:
        return "powershell"
    if re.search(r"\bcmd(?:\.exe)?\b", lower):
        return "cmd"
    return "shell"
