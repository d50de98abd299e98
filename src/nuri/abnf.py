"""RFC 3986 grammar rules, expressed as regular expressions.

Each rule is kept next to its ABNF so it can be checked against the RFC.
Only the rules needed to validate individual components are here; whole
URI-references are split by nuri.parser and validated piecewise.
"""

import re

# ALPHA = %x41-5A / %x61-7A
ALPHA: str = r"[A-Za-z]"

# DIGIT = %x30-39
DIGIT: str = r"[0-9]"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
HEXDIG: str = r"[0-9A-Fa-f]"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED: str = r"[A-Za-z0-9\-._~]"

# pct-encoded = "%" HEXDIG HEXDIG
PCT_ENCODED: str = rf"%{HEXDIG}{HEXDIG}"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS: str = r"[!$&'()*+,;=]"

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
PCHAR: str = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS}|[:@])"

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME: str = rf"{ALPHA}[A-Za-z0-9+\-.]*"

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USERINFO: str = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS}|:)*"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
DEC_OCTET: str = rf"(?:25[0-5]|2[0-4]{DIGIT}|1{DIGIT}{{2}}|[1-9]{DIGIT}|{DIGIT})"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPV4ADDRESS: str = rf"{DEC_OCTET}\.{DEC_OCTET}\.{DEC_OCTET}\.{DEC_OCTET}"

# h16 = 1*4HEXDIG
H16: str = rf"{HEXDIG}{{1,4}}"

# ls32 = ( h16 ":" h16 ) / IPv4address
LS32: str = rf"(?:{H16}:{H16}|{IPV4ADDRESS})"

# IPv6address =                            6( h16 ":" ) ls32
#             /                       "::" 5( h16 ":" ) ls32
#             / [               h16 ] "::" 4( h16 ":" ) ls32
#             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#             / [ *4( h16 ":" ) h16 ] "::"              ls32
#             / [ *5( h16 ":" ) h16 ] "::"              h16
#             / [ *6( h16 ":" ) h16 ] "::"
IPV6ADDRESS: str = (
    "(?:"
    + "|".join(
        (
            rf"(?:{H16}:){{6}}{LS32}",
            rf"::(?:{H16}:){{5}}{LS32}",
            rf"(?:{H16})?::(?:{H16}:){{4}}{LS32}",
            rf"(?:(?:{H16}:){{0,1}}{H16})?::(?:{H16}:){{3}}{LS32}",
            rf"(?:(?:{H16}:){{0,2}}{H16})?::(?:{H16}:){{2}}{LS32}",
            rf"(?:(?:{H16}:){{0,3}}{H16})?::{H16}:{LS32}",
            rf"(?:(?:{H16}:){{0,4}}{H16})?::{LS32}",
            rf"(?:(?:{H16}:){{0,5}}{H16})?::{H16}",
            rf"(?:(?:{H16}:){{0,6}}{H16})?::",
        )
    )
    + ")"
)

# ZoneID = 1*( unreserved / pct-encoded )    (RFC 6874)
ZONEID: str = rf"(?:{UNRESERVED}|{PCT_ENCODED})+"

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPVFUTURE: str = rf"[vV]{HEXDIG}+\.(?:{UNRESERVED}|{SUB_DELIMS}|:)+"

# IP-literal = "[" ( IPv6address / IPv6addrz / IPvFuture ) "]"
IP_LITERAL: str = rf"\[(?:{IPV6ADDRESS}(?:%25{ZONEID})?|{IPVFUTURE})\]"

# reg-name = *( unreserved / pct-encoded / sub-delims )
REG_NAME: str = rf"(?:{UNRESERVED}|{PCT_ENCODED}|{SUB_DELIMS})*"

# host = IP-literal / IPv4address / reg-name
HOST: str = rf"(?:{IP_LITERAL}|{IPV4ADDRESS}|{REG_NAME})"

# port = *DIGIT
PORT: str = rf"{DIGIT}*"

# path-abempty / path-absolute / path-rootless / path-empty, segment by segment:
# segment = *pchar
PATH: str = rf"(?:{PCHAR}|/)*"

# query = *( pchar / "/" / "?" )
QUERY: str = rf"(?:{PCHAR}|[/?])*"

# fragment = *( pchar / "/" / "?" )
FRAGMENT: str = QUERY

SCHEME_PAT: re.Pattern[str] = re.compile(SCHEME)
USERINFO_PAT: re.Pattern[str] = re.compile(USERINFO)
HOST_PAT: re.Pattern[str] = re.compile(HOST)
IP_LITERAL_PAT: re.Pattern[str] = re.compile(IP_LITERAL)
IPV6ADDRESS_PAT: re.Pattern[str] = re.compile(IPV6ADDRESS)
PORT_PAT: re.Pattern[str] = re.compile(PORT)
PATH_PAT: re.Pattern[str] = re.compile(PATH)
QUERY_PAT: re.Pattern[str] = re.compile(QUERY)
FRAGMENT_PAT: re.Pattern[str] = re.compile(FRAGMENT)
PCT_ENCODED_PAT: re.Pattern[str] = re.compile(PCT_ENCODED)
