"""
Line-buffered stdin reader for scripted cut commands
"""

import os
import select
import sys
from typing import List, TextIO


class StdinCommandReader:
    """
    Non-blocking reader of whole command lines.

    Polled once per frame by the game loop; returns every complete line
    typed since the last poll (e.g. "cut red 25 26 8"). Reads go straight
    to the file descriptor so select() always sees what is still unread.
    """

    def __init__(self, logger, stream: TextIO = sys.stdin):
        self._logger = logger
        self._stream = stream
        self._pending = ""

    def read_commands(self) -> List[str]:
        """
        Return pending command lines, stripped, skipping empty ones.

        A partial line is kept until its newline arrives.

        Returns:
            List of command strings (possibly empty)
        """
        fd = self._stream.fileno()
        while select.select([fd], [], [], 0)[0]:
            chunk = os.read(fd, 1024)
            if not chunk:
                # EOF
                break
            self._pending += chunk.decode("utf-8", errors="replace")

        *lines, self._pending = self._pending.split("\n")

        commands: List[str] = []
        for line in lines:
            line = line.strip()
            if line:
                self._logger.debug(f"Command received: '{line}'")
                commands.append(line)
        return commands
