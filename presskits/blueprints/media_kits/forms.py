from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, TextAreaField
from wtforms.validators import DataRequired, Optional, UUID, URL

from ...services.lifecycle import STATUSES

class MediaKitIdForm(FlaskForm):
    media_kit_id = StringField("Media kit", validators=[DataRequired(), UUID()])

class UpdateMdxForm(MediaKitIdForm):
    # empty content is a legitimate correction, so no DataRequired here
    mdx_content = TextAreaField("MDX content")

class UpdateStatusForm(MediaKitIdForm):
    status = SelectField("Status", choices=[(s, s) for s in STATUSES], validators=[DataRequired()])
    denial_reason = TextAreaField("Denial reason", validators=[Optional()])

class DenyMediaKitForm(MediaKitIdForm):
    denial_reason = TextAreaField("Denial reason", validators=[DataRequired()])

class EditMediaKitForm(MediaKitIdForm):
    instruction = TextAreaField("Instruction", validators=[DataRequired()])
    organization_url = StringField("Organization URL", validators=[Optional(), URL(require_tld=False)])
