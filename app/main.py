from fastapi import FastAPI

from .error_handlers import register_error_handlers
from .routes import cart, exercise, home, profile, session

app = FastAPI(title="FitCart")

register_error_handlers(app)

app.include_router(home.router)
app.include_router(exercise.router)
app.include_router(cart.router)
app.include_router(session.router)
app.include_router(profile.router)
