# Se importan todos los modelos acá para que queden registrados en Base.metadata
from .cliente_model import Cliente
from .servicio_model import Servicio
from .odontologo_model import Odontologo, odontologo_servicios
from .cita_model import Cita, EstadoCita
