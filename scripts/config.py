"""
Configuración de la API usando variables de entorno.
"""
import os
from dotenv import load_dotenv

# Cargar variables de entorno desde .env
load_dotenv()

DEFAULT_STORE_NAME = "Pasteleria Mil Sabores"


def get_api_config():
    """
    Obtiene la configuración de acceso a la API desde variables de entorno.

    Returns:
        dict: Diccionario con la URL base, timeout, reintentos y nombre de la tienda
    """
    return {
        'base_url': os.getenv('API_URL', ''),
        'timeout': float(os.getenv('API_TIMEOUT', '10')),
        'max_retries': int(os.getenv('API_MAX_RETRIES', '1')),
        'store_name': os.getenv('STORE_NAME', DEFAULT_STORE_NAME),
    }
