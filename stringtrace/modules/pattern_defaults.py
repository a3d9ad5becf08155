#!/usr/bin/env python3
"""Default suspicious-string pattern catalog."""

NETWORK = "network"
COMMAND = "command"
MALWARE = "malware"
CRYPTO = "crypto"

# name -> (regex, category, description, is_suspicious, severity)
DEFAULT_PATTERNS = {
    # Network indicators
    "url": (
        r"(?i)\b(?:https?|ftps?)://[^\s/$.?#][^\s]*",
        NETWORK,
        "Embedded URL",
        False,
        2,
    ),
    "ipv4_address": (
        r"\b(?:(?:25[0-5]|2[0-4]\d|1?\d?\d)\.){3}(?:25[0-5]|2[0-4]\d|1?\d?\d)\b",
        NETWORK,
        "Hardcoded IPv4 address",
        True,
        3,
    ),
    "onion_address": (
        r"(?i)\b[a-z2-7]{16}(?:[a-z2-7]{40})?\.onion\b",
        NETWORK,
        "Tor hidden service address",
        True,
        4,
    ),
    "dynamic_dns": (
        r"(?i)\b[\w-]+\.(?:duckdns\.org|no-ip\.(?:org|com|biz)|ddns\.net|hopto\.org|zapto\.org)\b",
        NETWORK,
        "Dynamic DNS host often used for C2",
        True,
        3,
    ),
    "paste_site": (
        r"(?i)\b(?:pastebin\.com|paste\.ee|hastebin\.com)/\w+",
        NETWORK,
        "Paste site link used for staging payloads",
        True,
        3,
    ),
    "user_agent": (
        r"^Mozilla/\d\.\d \(",
        NETWORK,
        "HTTP user agent string",
        False,
        1,
    ),
    # Command indicators
    "cmd_exec": (
        r"(?i)\bcmd(?:\.exe)?\s+/[ck]\b",
        COMMAND,
        "cmd.exe command execution",
        True,
        4,
    ),
    "powershell": (
        r"(?i)\bpowershell(?:\.exe)?\b",
        COMMAND,
        "PowerShell invocation",
        True,
        3,
    ),
    "powershell_encoded": (
        r"(?i)\bpowershell(?:\.exe)?\b.*\s-(?:e|ec|enc|encodedcommand)\s+[A-Za-z0-9+/=]{8,}",
        COMMAND,
        "PowerShell with an encoded command",
        True,
        5,
    ),
    "unix_shell": (
        r"(?:^|[\s'\"])/bin/(?:ba|da|z)?sh\b",
        COMMAND,
        "Unix shell interpreter",
        True,
        3,
    ),
    "shell_exec": (
        r"(?i)\b(?:sh|bash)\s+-c\s",
        COMMAND,
        "Inline shell command execution",
        True,
        4,
    ),
    "recon_commands": (
        r"(?i)\b(?:whoami|ipconfig|systeminfo|tasklist|net\s+(?:user|localgroup|view)|uname\s+-a)\b",
        COMMAND,
        "Host reconnaissance command",
        True,
        3,
    ),
    "download_cradle": (
        r"(?i)\b(?:wget|curl|certutil\s+-urlcache|bitsadmin\s+/transfer)\s+\S+",
        COMMAND,
        "Command-line payload download",
        True,
        4,
    ),
    "persistence_commands": (
        r"(?i)\b(?:schtasks\s+/create|reg\s+add|crontab\s+-|sc\s+create)\b",
        COMMAND,
        "Persistence via scheduled task, service or registry",
        True,
        4,
    ),
    "shadow_copy_delete": (
        r"(?i)\bvssadmin(?:\.exe)?\s+delete\s+shadows\b",
        COMMAND,
        "Volume shadow copy deletion",
        True,
        5,
    ),
    # Malware indicators
    "process_injection": (
        r"\b(?:VirtualAllocEx|WriteProcessMemory|CreateRemoteThread(?:Ex)?|NtUnmapViewOfSection"
        r"|QueueUserAPC|SetThreadContext|NtCreateThreadEx|RtlCreateUserThread)\b",
        MALWARE,
        "Process injection API",
        True,
        5,
    ),
    "dynamic_api_resolution": (
        r"\b(?:LoadLibrary(?:Ex)?[AW]?|GetProcAddress|LdrGetProcedureAddress)\b",
        MALWARE,
        "Runtime API resolution",
        True,
        2,
    ),
    "keylogging": (
        r"\b(?:SetWindowsHookEx[AW]?|GetAsyncKeyState|GetKeyboardState)\b",
        MALWARE,
        "Keystroke capture API",
        True,
        4,
    ),
    "anti_debugging": (
        r"\b(?:IsDebuggerPresent|CheckRemoteDebuggerPresent|NtQueryInformationProcess"
        r"|OutputDebugString[AW]?)\b",
        MALWARE,
        "Debugger detection API",
        True,
        3,
    ),
    "network_dlls": (
        r"(?i)\b(?:wininet|urlmon|ws2_32|winhttp)\.dll\b",
        MALWARE,
        "Networking library",
        True,
        2,
    ),
    "packer_markers": (
        r"(?:\bUPX[0-9!]|\.aspack\b|\bMPRESS[12]\b|\.themida\b|\.vmp[01]\b)",
        MALWARE,
        "Packer section or marker",
        True,
        3,
    ),
    "base64_blob": (
        r"^[A-Za-z0-9+/]{40,}={0,2}$",
        MALWARE,
        "Long base64 blob (possible obfuscated payload)",
        True,
        3,
    ),
    "autorun_registry": (
        r"(?i)\\(?:CurrentVersion\\Run(?:Once)?|Winlogon\\(?:Shell|Userinit))\b",
        MALWARE,
        "Autorun registry location",
        True,
        4,
    ),
    "sandbox_evasion": (
        r"(?i)\b(?:vboxservice|vmtoolsd|sbiedll|wireshark|procmon|ollydbg|x64dbg)(?:\.exe|\.dll)?\b",
        MALWARE,
        "Sandbox or analysis tool check",
        True,
        3,
    ),
    # Crypto indicators
    "private_key_block": (
        r"-----BEGIN (?:RSA |EC |DSA |OPENSSH |ENCRYPTED )?PRIVATE KEY-----",
        CRYPTO,
        "Embedded private key",
        True,
        5,
    ),
    "public_key_block": (
        r"-----BEGIN (?:RSA )?PUBLIC KEY-----",
        CRYPTO,
        "Embedded public key",
        False,
        1,
    ),
    "certificate_block": (
        r"-----BEGIN CERTIFICATE-----",
        CRYPTO,
        "Embedded certificate",
        False,
        1,
    ),
    "crypto_algorithm": (
        r"(?i)\b(?:AES(?:-?(?:128|192|256))?|RC4|Blowfish|ChaCha20|Salsa20|3DES|RSA)\b",
        CRYPTO,
        "Cipher algorithm name",
        False,
        1,
    ),
    "hash_algorithm": (
        r"(?i)\b(?:MD5|SHA-?1|SHA-?256|SHA-?512)\b",
        CRYPTO,
        "Hash algorithm name",
        False,
        1,
    ),
    "crypto_api": (
        r"\b(?:CryptEncrypt|CryptDecrypt|CryptGenKey|CryptImportKey|CryptAcquireContext[AW]?"
        r"|BCryptEncrypt|BCryptDecrypt)\b",
        CRYPTO,
        "Windows cryptography API",
        True,
        3,
    ),
    "ransom_note": (
        r"(?i)\b(?:your files (?:have been|are) encrypted|decryption key|pay (?:the )?ransom)\b",
        CRYPTO,
        "Ransom note phrase",
        True,
        5,
    ),
    "bitcoin_address": (
        r"\b(?:bc1[a-z0-9]{25,39}|[13][a-km-zA-HJ-NP-Z1-9]{25,34})\b",
        CRYPTO,
        "Bitcoin wallet address",
        True,
        4,
    ),
}
