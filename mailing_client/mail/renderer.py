import asyncio
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union
from concurrent.futures import ThreadPoolExecutor
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound, select_autoescape

from mailing_client.errors import RenderError


class ViewParameters:
    """
    Conjunto estructurado de parámetros con nombre para una vista.

    Un mapping vacío o ausente no produce un ViewParameters: equivale a
    renderizar la vista sin parámetros.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = MappingProxyType(dict(values))

    @property
    def values(self) -> Mapping[str, Any]:
        return self._values

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> Optional["ViewParameters"]:
        """
        Construye el conjunto de parámetros a partir de un diccionario.

        Args:
            mapping (Optional[Mapping[str, Any]]): Nombre del parámetro -> valor.

        Returns:
            Optional[ViewParameters]: None si el mapping es vacío o None.
        """
        if not mapping:
            return None
        return cls(mapping)

    @classmethod
    def coerce(
            cls,
            parameters: Union["ViewParameters", Mapping[str, Any], None]
        ) -> Optional["ViewParameters"]:
        if parameters is None or isinstance(parameters, ViewParameters):
            return parameters
        return cls.from_mapping(parameters)

    def __repr__(self) -> str:
        return f"ViewParameters({dict(self._values)!r})"


class ViewRenderer:
    """Renderiza vistas Jinja2 a HTML en un hilo dedicado y serializado."""

    def __init__(self, template_dir: Path) -> None:
        """
        Configura el entorno de plantillas y el hilo de renderizado.

        Args:
            template_dir (Path): Ruta al directorio de plantillas.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            undefined=StrictUndefined,
        )
        # Un único worker: todas las vistas de todos los llamadores se renderizan en serie
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="view-renderer")

    async def render(self, view: str, parameters: Optional[ViewParameters] = None) -> str:
        """
        Renderiza una vista en el hilo del renderer y espera el resultado.

        Args:
            view (str): Nombre de la plantilla, p. ej. "welcome.html".
            parameters (Optional[ViewParameters]): Parámetros de la vista, o None.

        Returns:
            str: HTML renderizado.

        Raises:
            RenderError: Si la plantilla no existe o los parámetros no encajan.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._render, view, parameters)

    def _render(self, view: str, parameters: Optional[ViewParameters]) -> str:
        self.logger.debug(f"Rendering view {view}")
        try:
            template = self.env.get_template(view)
            if parameters is None:
                return template.render()
            context: Dict[str, Any] = dict(parameters.values)
            return template.render(**context)
        except TemplateNotFound as e:
            self.logger.error(f"View {view} not found: {e}")
            raise RenderError(f"View {view} not found", view=view) from e
        except TemplateError as e:
            self.logger.error(f"Error rendering view {view}: {e}")
            raise RenderError(f"Error rendering view {view}: {e}", view=view) from e
        except Exception as e:
            # Errores en tiempo de ejecución de la plantilla (tipos de parámetros incompatibles)
            self.logger.error(f"Error rendering view {view}: {e}")
            raise RenderError(f"Error rendering view {view}: {e}", view=view) from e

    def close(self) -> None:
        """Detiene el hilo de renderizado esperando a las vistas pendientes."""
        self._executor.shutdown(wait=True)
