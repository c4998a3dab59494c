"""Forms for editing a member's public profile."""

from django import forms

from community.models import User


class UserProfileForm(forms.ModelForm):
    """Form to update user profile information."""
    introduction = forms.CharField(
        required=False,
        max_length=1000,
        widget=forms.Textarea(attrs={"rows": 4, "style": "resize: none;"}),
        label="Introduction",
    )

    class Meta:
        """Model/field config for user profile form."""
        model = User
        fields = list(User.PROFILE_FIELDS)
        labels = {
            'github_name': 'GitHub name',
            'real_name': 'Real name',
            'twitter_account': 'Twitter account',
            'personal_website': 'Personal website',
            'weibo_name': 'Weibo name',
            'weibo_id': 'Weibo ID',
        }
