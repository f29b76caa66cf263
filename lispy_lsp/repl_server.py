from __future__ import annotations

"""
Simple TCP REPL server for lispy.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(+ 1 2)"}
- Response: {"ok": true, "result": <rendering>}
         or {"ok": false, "error": <message>, "kind": <error class name>}

Every connection gets its own Interpreter, so sessions never share an
environment and no locking is needed between client threads.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from lispy.config import get_log_level, get_repl_address
from lispy.interpreter import Interpreter
from lispy.types.expression import render


logger = logging.getLogger(__name__)


def handle_request(interp: Interpreter, line: bytes) -> dict:
    """Decode one request line, evaluate it in `interp` and build the response."""
    try:
        req = json.loads(line.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as ex:
        logger.warning("Invalid request %r: %s", line, ex)
        return {"ok": False, "error": f"Invalid request: {ex}", "kind": "InvalidRequest"}

    if not isinstance(req, dict) or req.get("cmd") != "eval":
        cmd = req.get("cmd") if isinstance(req, dict) else None
        return {"ok": False, "error": f"Unknown cmd: {cmd}", "kind": "InvalidRequest"}

    code = req.get("code", "")
    if not isinstance(code, str):
        return {"ok": False, "error": "code must be a string", "kind": "InvalidRequest"}

    result = interp.eval_line(code)
    if result.ok:
        return {"ok": True, "result": render(result.value)}
    return {"ok": False, "error": str(result.error), "kind": result.error.kind}


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port if port is not None else default_port

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("Listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("Client connected from %s:%d", *addr)
        interp = Interpreter()
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = handle_request(interp, line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("Client %s:%d disconnected", *addr)


def main() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
