#===============================================================================
#
#  CellDL and bondgraph tools
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import logging
from typing import Any

#===============================================================================

import lxml.etree as etree
import structlog
from structlog.dev import BRIGHT, GREEN, RESET_ALL

#===============================================================================

_PROCESSORS = [
    structlog.processors.TimeStamper(fmt="ISO"),
    structlog.processors.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.dev.ConsoleRenderer(colors=True)
]

def set_log_level(level: int=logging.INFO):
#==========================================
    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False
    )

set_log_level()

log = structlog.get_logger()

#===============================================================================

def pretty_log(s: Any) -> str:
#=============================
    return f'{RESET_ALL}{GREEN}{str(s)}{RESET_ALL}{BRIGHT}'

#===============================================================================
#===============================================================================

class Issue(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.__reason = reason

    @property
    def reason(self):
        return self.__reason

def make_issue(e: Exception) -> Issue:
#=====================================
    if isinstance(e, Issue):
        return e
    issue = Issue(str(e))
    issue.__traceback__ = e.__traceback__
    return issue

class InvalidArgument(Issue, ValueError):
    pass

#===============================================================================
#===============================================================================

def etree_from_string(xml: str) -> etree.Element:
    parser = etree.XMLParser(remove_blank_text=True)
    try:
        return etree.fromstring(xml, parser)
    except etree.XMLSyntaxError as error:
        raise ValueError(error)

#===============================================================================
#===============================================================================
