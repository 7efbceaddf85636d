import logging
from dataclasses import dataclass

from requests import Session

from ..config import DEFAULT_API_ENDPOINT, Config


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connection:
    """
    Sessão HTTP autenticada e a URL base da API.

    Attributes:
        session (Session): Sessão do requests com os cabeçalhos de autenticação.
        endpoint (str): URL base da API, sem barra final.
    """
    session: Session
    endpoint: str

    def url(self, *parts: object) -> str:
        """Monta a URL de um recurso, ex: url("sheets", 123, "rows")."""
        return "/".join([self.endpoint, *(str(part) for part in parts)])


def auth_header(access_token: str) -> str:
    """Retorna o valor do cabeçalho Authorization para um token de acesso."""
    return f"Bearer {access_token}"


def _connect_token(access_token: str) -> Session:
    """
    Cria uma sessão HTTP autenticada com um token de acesso.

    Args:
        access_token (str): Token de acesso da API.

    Returns:
        Session: Sessão com os cabeçalhos Authorization e Accept definidos.
    """
    session = Session()
    session.headers.update({
        "Authorization": auth_header(access_token),
        "Accept": "application/json",
    })
    return session


def get_connection(access_token: str, api_endpoint: str = DEFAULT_API_ENDPOINT) -> Connection:
    """
    Obtém uma conexão com a API usando um token de acesso.

    Args:
        access_token (str): Token de acesso da API.
        api_endpoint (str): URL base da API.

    Returns:
        Connection: Conexão pronta para uso pelas operações do gateway.
    """
    logger.debug("Conectando à API em: %s", api_endpoint)
    connection = Connection(session=_connect_token(access_token), endpoint=api_endpoint.rstrip("/"))
    logger.info("Sessão autenticada criada para %s.", connection.endpoint)
    return connection


def get_connection_from_config(config: Config | None = None) -> Connection:
    """
    Obtém uma conexão a partir da configuração (ou das variáveis de ambiente).

    Raises:
        ValueError: Se o token de acesso não estiver configurado.
    """
    config = config or Config()
    return get_connection(config.access_token, config.api_endpoint)
