from app.schemas.auth import Token, UserCreate, UserLogin, UserResponse
from app.schemas.boarding_house import BoardingHouseCreate, BoardingHouseUpdate, BoardingHouseResponse, OccupancySummary
from app.schemas.room import RoomCreate, RoomResponse, OccupantCreate, OccupantUpdate, OccupantResponse
from app.schemas.notification import NotificationResponse, UnreadCount
from app.schemas.compliance import ComplianceResult, ReevaluationResult, AuditLogEntry, AdminStats
