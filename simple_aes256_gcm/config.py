import os
from dotenv import load_dotenv
load_dotenv()

# Clave de texto de 32 bytes; DEMO_KEY_B64 tiene prioridad si está definida.
DEMO_KEY = os.getenv("DEMO_KEY", "01234567890123456789012345678901")
DEMO_KEY_B64 = os.getenv("DEMO_KEY_B64", "")
DEMO_MESSAGE = os.getenv("DEMO_MESSAGE", "This is a text.")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
