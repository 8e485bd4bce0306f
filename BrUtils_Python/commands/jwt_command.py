"""JWT command - show the payload of a token."""
from rich.console import Console

from ..utils.encoding_utils import EncodingUtils

console = Console()


class JwtCommand:
    """Decode the payload of a JSON Web Token without verifying it."""

    def __init__(self, token: str):
        self.token = token.strip()

    def execute(self) -> int:
        """Execute the JWT command."""
        if not EncodingUtils.jwt_check(self.token):
            console.print("[red]❌ Token JWT inválido[/]")
            return 1
        console.print_json(data=EncodingUtils.jwt_payload(self.token))
        return 0
