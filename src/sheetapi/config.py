from dataclasses import dataclass
import os

from dotenv import load_dotenv

# Carrega as variáveis de ambiente do arquivo .env
load_dotenv()

DEFAULT_API_ENDPOINT = "https://api.smartsheet.com/2.0"

# Mesmo nome de variável usado pelo SDK oficial
ACCESS_TOKEN_ENV_VAR = "SMARTSHEET_ACCESS_TOKEN"
API_ENDPOINT_ENV_VAR = "SMARTSHEET_API_ENDPOINT"


@dataclass(frozen=True)
class Config:
    """
    Configurações do cliente, obtidas de variáveis de ambiente.

    Valores passados diretamente têm prioridade sobre o ambiente.

    Attributes:
        access_token (str | None): Token de acesso, obtido da variável de ambiente SMARTSHEET_ACCESS_TOKEN.
        api_endpoint (str | None): URL base da API, obtida de SMARTSHEET_API_ENDPOINT (padrão: API pública).
    """
    access_token: str | None = None
    api_endpoint: str | None = None

    def __post_init__(self):
        if self.access_token is None:
            object.__setattr__(self, 'access_token', os.getenv(ACCESS_TOKEN_ENV_VAR))
        if self.api_endpoint is None:
            object.__setattr__(
                self, 'api_endpoint', os.getenv(API_ENDPOINT_ENV_VAR) or DEFAULT_API_ENDPOINT
            )

        if not self.access_token:
            raise ValueError(f"A variável de ambiente '{ACCESS_TOKEN_ENV_VAR}' é obrigatória.")

        object.__setattr__(self, 'api_endpoint', self.api_endpoint.rstrip('/'))
