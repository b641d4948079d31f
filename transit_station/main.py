from fastapi import FastAPI
from transit_station import __version__
from transit_station.config import settings, setup_logging
from transit_station.stations import router as stations_router
from transit_station.vehicles import router as vehicles_router
from transit_station.passengers import router as passengers_router

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    description="In-memory stations, vehicles and passenger bookings",
    debug=settings.DEBUG
)

# Include routers
app.include_router(
    stations_router.router,
    prefix=f"{settings.API_V1_STR}/stations",
    tags=["Stations & Schedules"]
)

app.include_router(
    vehicles_router.router,
    prefix=f"{settings.API_V1_STR}/vehicles",
    tags=["Vehicles"]
)

app.include_router(
    passengers_router.router,
    prefix=f"{settings.API_V1_STR}/passengers",
    tags=["Passengers & Bookings"]
)

@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    setup_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
