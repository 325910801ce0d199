"""
HTTP client for a procbus server.
"""

from typing import Any, Dict, List, Optional

import requests

from procbus.procedure import PathLike


class RemoteCallError(Exception):
    """Remote procedure call returned a non-success status"""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"Remote call failed ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail


class ProcedureClient:
    """Calls procedures served by procbus.http"""

    def __init__(self, base_url: str, timeout: float = 5):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def call(self, path: PathLike, payload: Optional[Any] = None) -> Any:
        """
        Invoke a remote procedure.

        Raises:
            RemoteCallError: On any non-2xx response
            requests.exceptions.RequestException: On transport failure
        """
        # Sent as-is; the server answers 404 for paths it cannot resolve
        key = path if isinstance(path, str) else '.'.join(path)
        response = requests.post(
            f'{self.base_url}/procedures/{key}',
            json=payload,
            timeout=self.timeout
        )
        return self._result(response)

    def list_procedures(self) -> List[Dict[str, str]]:
        response = requests.get(f'{self.base_url}/procedures', timeout=self.timeout)
        return self._result(response)

    @staticmethod
    def _result(response: requests.Response) -> Any:
        if not 200 <= response.status_code < 300:
            try:
                body = response.json()
                detail = body.get('detail') if isinstance(body, dict) else body
            except ValueError:
                detail = response.text
            raise RemoteCallError(response.status_code, detail)
        return response.json()
