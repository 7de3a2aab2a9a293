"""Decoded commands -> text, JSON and XML output."""

import dataclasses
import json
import re
from xml.sax.saxutils import escape as _xml_escape, quoteattr as _quoteattr

# Regex matching XML-illegal characters (control chars except \t, \n, \r)
_ILLEGAL_XML_CHARS = re.compile(
    '[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x84\x86-\x9f]'
)


def _sanitize(text: str) -> str:
    """Remove characters that are illegal in XML."""
    return _ILLEGAL_XML_CHARS.sub('\ufffd', text)


def xml_escape(text: str) -> str:
    return _xml_escape(_sanitize(text))


def quoteattr(text: str) -> str:
    return _quoteattr(_sanitize(text))


def command_fields(cmd) -> dict:
    return {f.name: getattr(cmd, f.name) for f in dataclasses.fields(cmd)}


def command_to_dict(cmd) -> dict:
    result = {'command': cmd.name}
    result.update(command_fields(cmd))
    return result


def format_command(cmd) -> str:
    """Render one command, one field per line."""
    fields = command_fields(cmd)
    if not fields:
        return cmd.name
    lines = [f'{cmd.name}(']
    for name, value in fields.items():
        lines.append(f'    {name}: {value!r},')
    lines.append(')')
    return '\n'.join(lines)


def emit_text(commands) -> str:
    return '\n'.join(format_command(cmd) for cmd in commands)


def emit_json(header, commands, source_path="") -> str:
    doc = {
        'source': source_path,
        'version': header.version,
        'commands': [command_to_dict(cmd) for cmd in commands],
    }
    return json.dumps(doc, ensure_ascii=False, indent=2)


def emit_xml(header, commands, source_path="") -> str:
    """Convert decoded commands to an XML document string."""
    parts = ['<?xml version="1.0" encoding="UTF-8"?>']
    parts.append(
        f'<snss-session source={quoteattr(source_path)} '
        f'version={quoteattr(str(header.version))}>'
    )
    for cmd in commands:
        parts.append(_emit_command(cmd, indent=2))
    parts.append('</snss-session>')
    return '\n'.join(parts)


def _emit_command(cmd, indent=0):
    attrs = [f'type={quoteattr(cmd.name)}']
    url = None
    for name, value in command_fields(cmd).items():
        if name == 'url':
            url = value
        else:
            attrs.append(f'{name.replace("_", "-")}={quoteattr(str(value))}')

    if url is None:
        return f'{" " * indent}<command {" ".join(attrs)} />'
    return (
        f'{" " * indent}<command {" ".join(attrs)}>'
        f'<url>{xml_escape(url)}</url></command>'
    )
