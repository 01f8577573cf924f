from songguess import db, bcrypt
from flask_login import UserMixin


class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    # Stored unordered; readers sort by guessed_position
    guesses = db.relationship('SongGuess', back_populates='user', cascade='all, delete-orphan')

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def save(self):
        """Persist the user and its guesses, re-raising any backend failure."""
        db.session.add(self)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }


class SongGuess(db.Model):
    __tablename__ = 'song_guess'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=False, index=True)
    song_title = db.Column(db.Text, nullable=False, default='')
    guessed_position = db.Column(db.Integer, nullable=False)  # 1-based
    user = db.relationship('User', back_populates='guesses')

    def to_dict(self):
        return {
            'song_title': self.song_title,
            'guessed_position': self.guessed_position,
        }
