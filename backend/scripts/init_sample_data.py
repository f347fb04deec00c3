import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mindhaven.database import SessionLocal, init_db
from mindhaven.models.user_models import User
from mindhaven.services.conversation_recorder import ConversationRecorder
from mindhaven.services.emotion_classifier import classify
from mindhaven.services.response_generator import generate
from mindhaven.utils.auth import get_password_hash

SAMPLE_USERS = [
    {"email": "sam@example.com", "name": "Sam Lee", "display_name": "Sam"},
    {"email": "riley@example.com", "name": "Riley Park", "display_name": None},
]

SAMPLE_MESSAGES = {
    "sam@example.com": [
        "I am so happy and excited today!",
        "Work went fine, nothing special",
        "I'm a bit confused about what to do next",
    ],
    "riley@example.com": [
        "I feel so anxious and overwhelmed about everything",
        "I've been sad and hopeless all week",
        "I'm frustrated and annoyed with my roommate",
    ],
}

def init_sample_conversations():
    init_db()
    db = SessionLocal()
    try:
        users = {}
        for data in SAMPLE_USERS:
            user = db.query(User).filter(User.email == data["email"]).first()
            if not user:
                user = User(
                    email=data["email"],
                    hashed_password=get_password_hash("password123"),
                    name=data["name"],
                    display_name=data["display_name"],
                    consent_given=True,
                )
                db.add(user)
                db.commit()
                db.refresh(user)
            users[data["email"]] = user

        recorder = ConversationRecorder(db)
        stored = 0
        for email, messages in SAMPLE_MESSAGES.items():
            user = users[email]
            for message in messages:
                classification = classify(message)
                reply = generate(message, classification.emotion, user.greeting_name)
                if recorder.record(user.id, message, reply, classification).success:
                    stored += 1

        print(f"Sample data initialized: {len(users)} users, {stored} conversations")
    finally:
        db.close()

if __name__ == "__main__":
    init_sample_conversations()
