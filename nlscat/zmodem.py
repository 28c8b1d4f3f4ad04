"""ZMODEM protocol constants."""

from __future__ import annotations

import enum

ZPAD = ord("*")
ZDLE = 0o30
ZDLEE = ZDLE ^ 0o100
ZBIN = ord("A")
ZHEX = ord("B")
ZBIN32 = ord("C")

# Byte positions within the four-byte header.
ZF0 = 3
ZF1 = 2
ZF2 = 1
ZF3 = 0
ZP0 = 0
ZP1 = 1
ZP2 = 2
ZP3 = 3

# Values returned by the escaped-byte reader besides plain bytes.
GOTOR = 0o400

ZATTNLEN = 32
TESCCTL = 0o100
TESC8 = 0o200

ZCBIN = 1
ZCNL = 2
ZCRESUM = 3

ZF1_ZMSKNOLOC = 0x80
ZF1_ZMMASK = 0x1F
ZF1_ZMNEWL = 1
ZF1_ZMCRC = 2
ZF1_ZMAPND = 3
ZF1_ZMCLOB = 4
ZF1_ZMNEW = 5
ZF1_ZMDIFF = 6
ZF1_ZMPROT = 7
ZF1_ZMCHNG = 8

ZTLZW = 1
ZTCRYPT = 2
ZTRLE = 3
ZXSPARS = 64

ZCACK1 = 1

ZF1_CANVHDR = 0x01
ZF1_TIMESYNC = 0x02


class FrameType(enum.IntEnum):
    """Header frame types."""

    ZRQINIT = 0
    ZRINIT = 1
    ZSINIT = 2
    ZACK = 3
    ZFILE = 4
    ZSKIP = 5
    ZNAK = 6
    ZABORT = 7
    ZFIN = 8
    ZRPOS = 9
    ZDATA = 10
    ZEOF = 11
    ZFERR = 12
    ZCRC = 13
    ZCHALLENGE = 14
    ZCOMPL = 15
    ZCAN = 16
    ZFREECNT = 17
    ZCOMMAND = 18
    ZSTDERR = 19


class FrameEnd(enum.IntEnum):
    """Characters following ZDLE that end a data subpacket or mark a rubout."""

    ZCRCE = ord("h")
    ZCRCG = ord("i")
    ZCRCQ = ord("j")
    ZCRCW = ord("k")
    ZRUB0 = ord("l")
    ZRUB1 = ord("m")


GOTCRCE = FrameEnd.ZCRCE | GOTOR
GOTCRCG = FrameEnd.ZCRCG | GOTOR
GOTCRCQ = FrameEnd.ZCRCQ | GOTOR
GOTCRCW = FrameEnd.ZCRCW | GOTOR
GOTCAN = GOTOR | 0o30


class ReceiverCaps(enum.IntFlag):
    """Capability bits in the ZF0 byte of a ZRINIT header."""

    CANFDX = 0x01
    CANOVIO = 0x02
    CANBRK = 0x04
    CANCRY = 0x08
    CANLZW = 0x10
    CANFC32 = 0x20
    ESCCTL = 0x40
    ESC8 = 0x80