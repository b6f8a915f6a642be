"""Fixed Spanish display strings used across the workflow."""

from __future__ import annotations

from typing import Dict, Optional

MESSAGES: Dict[str, str] = {
    "app_title": "Carga de Asistencia",
    "missing_dates": "Por favor ingresa las fechas de inicio y fin",
    "missing_credential": "Por favor ingresa la contraseña",
    "missing_content": "Por favor sube un archivo con los datos",
    "processing_failed": "Error al procesar los datos",
    "connection_error": "Error de conexión con el servidor. Verifica que el servicio esté activo.",
    "unsupported_file": "Solo se aceptan archivos .txt o .csv",
    "unreadable_file": "No se pudo leer el archivo",
    "retry_prompt": "¿Intentar de nuevo?",
    "confirm_required": "Usa --yes para confirmar el envío en modo no interactivo",
    "invalid_option": "Opción inválida, intenta de nuevo.",
    "option_prompt": "→ Opción:",
    "yes_or_no": "Responde sí o no.",
    "interrupted": "Interrumpido por el usuario",
    "invalid_config": "Configuración inválida",
    "date_range_label": "Rango de Fechas",
    "start_date_prompt": "Fecha inicio (AAAA-MM-DD):",
    "end_date_prompt": "Fecha fin (AAAA-MM-DD):",
    "credential_prompt": "Contraseña:",
    "entry_mode_label": "Método de Entrada",
    "mode_manual": "Pegar Texto",
    "mode_upload": "Subir Archivo",
    "file_prompt": "Ruta del archivo (.txt o .csv):",
    "manual_prompt": "Pega aquí los datos de asistencia (línea vacía para terminar):",
    "confirm_title": "¿Estás seguro que quieres procesar esta información?",
    "confirm_range": "Se cargarán los datos para el rango:",
    "confirm_yes": "Sí, Procesar",
    "confirm_back": "Regresar",
    "loading_title": "Procesando Datos...",
    "loading_subtitle": "Enviando a BigQuery",
    "success_title": "¡Carga Exitosa!",
    "matched_title": "Registros Procesados",
    "warehouse_loaded": "Cargados a BigQuery",
    "warehouse_not_loaded": "No se cargaron a BigQuery",
    "unmatched_title": "Registros No Procesados (Misc)",
    "unmatched_subtitle": "Clases no reconocidas o con baja asistencia",
    "download_csv": "Descargar CSV",
    "csv_saved": "CSV guardado en",
    "upload_another": "Subir Otro Archivo",
    "error_title": "Error",
}


def t(key: str, fallback: Optional[str] = None) -> str:
    """Return the display string for ``key``, or ``fallback``/``key`` if unknown."""
    return MESSAGES.get(key) or fallback or key
