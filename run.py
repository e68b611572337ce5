import uvicorn

from classpoint.main import app

if __name__ == "__main__":
    uvicorn.run(app)
