from __future__ import annotations

import re

# Компилируются один раз при импорте модуля

MESSAGE_NAME = re.compile(r'BO_\s+(\d+)\s+(\w+):')
MESSAGE_SIZE = re.compile(r'BO_\s+(\d+)\s+\w+:\s+(\d+)')
MESSAGE_TRANSMITTER = re.compile(r'BO_\s+(\d+)\s+\w+:\s+\d+\s+(\w+)')
MESSAGE_HEADER = re.compile(r'BO_\s+(\d+)\s+\w+:')

DEFAULT_CYCLE_TIME = re.compile(r'BA_DEF_DEF_\s+"GenMsgCycleTime"\s+(\d+);')
EXPLICIT_CYCLE_TIME = re.compile(r'BA_ "GenMsgCycleTime" BO_ (\d+) (\d+);')

INITIAL_VALUE = re.compile(r'BA_\s+"GenSigStartValue"\s+SG_\s+(\d+)\s+(\S+)\s+([^;]+);')

VALUE_DESCRIPTION = re.compile(r'VAL_\s+(\d+)\s+(\w+)\s+(.+?);')
VALUE_PAIR = re.compile(r'(\d+)\s+"([^"]+)"')

# SG_ <name> <mux> : <start>|<size>@<order><sign> (<factor>,<offset>) [<min>|<max>] "<unit>" <receivers>
SIGNAL = re.compile(
    r'SG_\s+(?P<name>\w+)\s*(?P<mux>[mM]?\d*)\s*:\s*'
    r'(?P<start_bit>\d+)\|(?P<size>\d+)@(?P<order>[01])(?P<sign>[+-])\s*'
    r'\((?P<factor>[^,]+),(?P<offset>[^)]+)\)\s*'
    r'\[(?P<min>[^|]+)\|(?P<max>[^\]]+)\]\s*'
    r'"(?P<unit>[^"]*)"\s*(?P<receivers>.*)'
)
