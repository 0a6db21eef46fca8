"""📦 modules/ — Bounded contexts específicos del negocio

✨ Estado actual:
   • arithmetic/ → Números racionales (construcción, suma, formato, parseo)

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Value Objects y excepciones del subdominio
   • application/   → Casos de uso (API pública instrumentada)
   • infrastructure/→ Observabilidad (logs estructurados, métricas)
   • presentation/  → CLI
"""
