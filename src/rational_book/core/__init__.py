"""📦 core/ — Building blocks matemáticos universales

✨ ¿Qué pertenece aquí?
   • Helpers aritméticos reusables en CUALQUIER dominio:
     - greatest_common_divisor
   • Funciones puras sobre enteros, sin dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Value Objects del dominio (RationalNumber)
   • Excepciones semánticas (InvalidArgument)
   • Logging, métricas o cualquier I/O

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/

💡 Principio preventivo:
   Si no podrías reusar este código fuera de la aritmética de fracciones,
   probablemente NO pertenece a core/.
"""

from rational_book.core.number_theory import greatest_common_divisor

__all__ = ["greatest_common_divisor"]
