from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from .. import crud, schemas

router = APIRouter(tags=["jobs"])


@router.get("/jobs", response_model=schemas.DataResponse[list[schemas.JobRead]])
def list_jobs(db: Session = Depends(get_db)):
    return {"data": crud.crud_job.list_jobs(db)}


@router.get("/jobs/{job_id}", response_model=schemas.DataResponse[schemas.JobRead])
def read_job(job_id: int, db: Session = Depends(get_db)):
    return {"data": crud.crud_job.get_job(db, job_id)}
