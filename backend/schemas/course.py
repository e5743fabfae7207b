from pydantic import Field
from typing import List, Optional

from schemas.user import CamelModel

# Request schema for creating a course; price and URL are checked client-side only
class CourseCreate(CamelModel):
    title: str
    description: str = ""
    image_url: Optional[str] = None
    price: float

# Request schema for updating a course; omitted fields are left untouched
class CourseUpdate(CamelModel):
    course_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[float] = None

# Response schema for a single course
class CourseOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = None
    creator_id: str

# Acknowledgement for create/update/delete
class CourseAck(CamelModel):
    message: str
    course_id: str

class CourseListResponse(CamelModel):
    message: str
    courses: List[CourseOut]

# Request schema for buying a course
class PurchaseRequest(CamelModel):
    course_id: str = Field(min_length=1)

class PurchaseOut(CamelModel):
    id: str
    user_id: str
    course_id: str

# A user's purchases plus the courses they reference
class PurchasesResponse(CamelModel):
    message: str
    purchases: List[PurchaseOut]
    course_data: List[CourseOut]
