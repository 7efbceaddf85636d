import logging
from collections.abc import Iterable, Sequence
from typing import Any

from requests import Response

from ..errors import ApiErrorDetail, ColumnNotFound, RequestError, SheetNotFound
from ..models.column import Column
from ..models.row import Row
from ..models.sheet import IndexResult, RowResult, Sheet, SheetSummary
from .connection import Connection


logger = logging.getLogger(__name__)


def _params(**kwargs: Any) -> dict[str, str]:
    """
    Monta os parâmetros de query string, descartando valores ausentes.

    Listas viram valores separados por vírgula; booleanos viram "true"/"false".
    """
    params: dict[str, str] = {}
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple, set)):
            params[key] = ",".join(str(item) for item in value)
        else:
            params[key] = str(value)
    return params


def _request_error(response: Response) -> RequestError:
    """Converte uma resposta de erro em RequestError, lendo o objeto de erro da API se possível."""
    try:
        error = ApiErrorDetail.from_dict(response.json())
    except (ValueError, KeyError, TypeError):
        return RequestError(response.status_code, response.reason, message=response.text)
    return RequestError(response.status_code, response.reason, error=error)


def _request(
        connection: Connection,
        method: str,
        path: Sequence[object],
        params: dict[str, str] | None = None,
        body: Any = None,
) -> Any:
    """
    Executa uma requisição e retorna o corpo JSON da resposta.

    Args:
        connection (Connection): Conexão autenticada.
        method (str): Método HTTP.
        path (Sequence[object]): Partes do caminho do recurso, ex: ("sheets", 123).
        params (dict[str, str] | None): Parâmetros de query string.
        body (Any): Corpo JSON da requisição.

    Returns:
        Any: Corpo da resposta já decodificado.

    Raises:
        RequestError: Se a API responder com status de erro.
    """
    url = connection.url(*path)
    logger.debug("%s %s params=%s", method, url, params)

    response = connection.session.request(method, url, params=params or None, json=body)

    if not response.ok:
        error = _request_error(response)
        logger.error("Requisição %s %s falhou: %s", method, url, error)
        raise error

    return response.json()


# ============================================================================
# SHEETS
# ============================================================================

def list_sheets(
        connection: Connection,
        include: Iterable[str] | None = None,
        include_all: bool | None = None,
        modified_since: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
) -> IndexResult[SheetSummary]:
    """
    Lista as planilhas acessíveis ao usuário.

    Apenas a página solicitada é retornada; use `include_all=True` para
    receber todos os itens em uma única resposta.

    Returns:
        IndexResult[SheetSummary]: Página de planilhas.
    """
    params = _params(
        include=list(include) if include else None,
        includeAll=include_all,
        modifiedSince=modified_since,
        page=page,
        pageSize=page_size,
    )
    data = _request(connection, "GET", ("sheets",), params)
    result = IndexResult.from_dict(data, SheetSummary.from_dict)
    logger.info("%d planilhas listadas.", len(result.data))
    return result


def get_sheet(
        connection: Connection,
        sheet_id: int,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
        row_ids: Iterable[int] | None = None,
        row_numbers: Iterable[int] | None = None,
        column_ids: Iterable[int] | None = None,
        level: int | None = None,
) -> Sheet:
    """
    Obtém uma planilha com suas colunas e linhas.

    Args:
        connection (Connection): Conexão autenticada.
        sheet_id (int): ID da planilha.
        include (Iterable[str] | None): Elementos extras (ex: "objectValue", "format").
        exclude (Iterable[str] | None): Elementos a omitir (ex: "nonexistentCells").
        row_ids (Iterable[int] | None): Restringe às linhas com esses IDs.
        row_numbers (Iterable[int] | None): Restringe às linhas com esses números.
        column_ids (Iterable[int] | None): Restringe às colunas com esses IDs.
        level (int | None): Nível de compatibilidade de tipos de coluna.

    Returns:
        Sheet: A planilha obtida.
    """
    params = _params(
        include=list(include) if include else None,
        exclude=list(exclude) if exclude else None,
        rowIds=list(row_ids) if row_ids else None,
        rowNumbers=list(row_numbers) if row_numbers else None,
        columnIds=list(column_ids) if column_ids else None,
        level=level,
    )
    sheet = Sheet.from_dict(_request(connection, "GET", ("sheets", sheet_id), params))
    logger.info("Planilha obtida com sucesso: %s (%d linhas)", sheet.name, len(sheet.rows))
    return sheet


def get_sheet_with_multi_contact_info(connection: Connection, sheet_id: int) -> Sheet:
    """Obtém uma planilha incluindo os detalhes de colunas MULTI_CONTACT (objectValue)."""
    return get_sheet(connection, sheet_id, include=["objectValue"], level=2)


def get_sheet_by_name(connection: Connection, sheet_name: str) -> Sheet:
    """
    Obtém uma planilha pelo nome.

    Raises:
        SheetNotFound: Se nenhuma planilha acessível tiver esse nome.
    """
    sheets = list_sheets(connection, include_all=True)
    for summary in sheets.data:
        if summary.name == sheet_name:
            return get_sheet(connection, summary.id)

    logger.error("Planilha '%s' não encontrada.", sheet_name)
    raise SheetNotFound(sheet_name)


# ============================================================================
# ROWS
# ============================================================================

def get_row(
        connection: Connection,
        sheet_id: int,
        row_id: int,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
        level: int | None = None,
) -> Row:
    """
    Obtém uma linha de uma planilha.

    Returns:
        Row: A linha obtida.
    """
    params = _params(
        include=list(include) if include else None,
        exclude=list(exclude) if exclude else None,
        level=level,
    )
    return Row.from_dict(_request(connection, "GET", ("sheets", sheet_id, "rows", row_id), params))


def get_row_with_column_data(connection: Connection, sheet_id: int, row_id: int) -> Row:
    """
    Obtém uma linha junto com as colunas da planilha.

    As colunas em `Row.columns` permitem construir um ColumnMapper sem buscar
    a planilha inteira.
    """
    return get_row(connection, sheet_id, row_id, include=["columns"])


def get_row_with_multi_contact_info(connection: Connection, sheet_id: int, row_id: int) -> Row:
    """Obtém uma linha (com colunas) incluindo os detalhes de colunas MULTI_CONTACT."""
    return get_row(connection, sheet_id, row_id, include=["objectValue", "columns"], level=2)


def add_rows(
        connection: Connection,
        sheet_id: int,
        rows: Iterable[Row],
        allow_partial_success: bool | None = None,
        override_validation: bool | None = None,
) -> RowResult:
    """
    Adiciona linhas a uma planilha.

    Raises:
        RowLocationError: Se alguma linha tiver especificadores de posição conflitantes.
        RequestError: Se a API rejeitar a requisição.
    """
    body = [row.to_dict() for row in rows]
    params = _params(allowPartialSuccess=allow_partial_success, overrideValidation=override_validation)
    logger.debug("Adicionando %d linhas na planilha %d.", len(body), sheet_id)

    result = RowResult.from_dict(_request(connection, "POST", ("sheets", sheet_id, "rows"), params, body))

    logger.info("%d linhas adicionadas na planilha %d.", len(result.result), sheet_id)
    return result


def update_rows(
        connection: Connection,
        sheet_id: int,
        rows: Iterable[Row],
        allow_partial_success: bool | None = None,
        override_validation: bool | None = None,
) -> RowResult:
    """
    Atualiza linhas existentes de uma planilha. Cada linha deve ter `id`.

    Raises:
        RowLocationError: Se alguma linha tiver especificadores de posição conflitantes.
        RequestError: Se a API rejeitar a requisição.
    """
    body = [row.to_dict() for row in rows]
    params = _params(allowPartialSuccess=allow_partial_success, overrideValidation=override_validation)
    logger.debug("Atualizando %d linhas na planilha %d.", len(body), sheet_id)

    result = RowResult.from_dict(_request(connection, "PUT", ("sheets", sheet_id, "rows"), params, body))

    logger.info("%d linhas atualizadas na planilha %d.", len(result.result), sheet_id)
    return result


def delete_rows(
        connection: Connection,
        sheet_id: int,
        row_ids: Iterable[int],
        ignore_rows_not_found: bool | None = None,
) -> list[int]:
    """
    Remove linhas de uma planilha.

    Returns:
        list[int]: IDs das linhas removidas.
    """
    ids = list(row_ids)
    if not ids:
        logger.debug("Nenhuma linha para remover na planilha %d.", sheet_id)
        return []

    params = _params(ids=ids, ignoreRowsNotFound=ignore_rows_not_found)
    data = _request(connection, "DELETE", ("sheets", sheet_id, "rows"), params)

    deleted = list(data.get("result") or [])
    logger.info("%d linhas removidas da planilha %d.", len(deleted), sheet_id)
    return deleted


# ============================================================================
# COLUMNS
# ============================================================================

def list_columns(
        connection: Connection,
        sheet_id: int,
        include: Iterable[str] | None = None,
        include_all: bool | None = None,
        level: int | None = None,
) -> IndexResult[Column]:
    """Lista as colunas de uma planilha."""
    params = _params(
        include=list(include) if include else None,
        includeAll=include_all,
        level=level,
    )
    data = _request(connection, "GET", ("sheets", sheet_id, "columns"), params)
    return IndexResult.from_dict(data, Column.from_dict)


def get_column(
        connection: Connection,
        sheet_id: int,
        column_id: int,
        include: Iterable[str] | None = None,
        level: int | None = None,
) -> Column:
    """Obtém uma coluna de uma planilha pelo ID."""
    params = _params(include=list(include) if include else None, level=level)
    return Column.from_dict(_request(connection, "GET", ("sheets", sheet_id, "columns", column_id), params))


def get_column_by_title(connection: Connection, sheet_id: int, column_title: str) -> Column:
    """
    Obtém uma coluna de uma planilha pelo título.

    Raises:
        ColumnNotFound: Se nenhuma coluna tiver esse título.
    """
    columns = list_columns(connection, sheet_id, include_all=True)
    for column in columns.data:
        if column.title == column_title:
            return column

    logger.error("Coluna '%s' não encontrada na planilha %d.", column_title, sheet_id)
    raise ColumnNotFound(column_title)
