from fastapi import APIRouter, Depends, Request

from auth import current_user_auth
from views import render

router = APIRouter(tags=["root"], dependencies=[Depends(current_user_auth)])


@router.get("/")
def read_root(request: Request):
    return render(request, "welcome/index.html")


@router.get("/health")
def health_check():
    return {"status": "healthy"}
